# knp_tree/core/errors.py


class ParseError(ValueError):
    """
    Единственный тип ошибки разбора вывода KNP.
    Сообщение описывает фрагмент входа, на котором разбор остановился.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
