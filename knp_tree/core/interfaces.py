# knp_tree/core/interfaces.py
from abc import ABC, abstractmethod
from typing import Any, List
from .data_structures import BList


class BaseMorphemeParser(ABC):
    @abstractmethod
    def parse_line(self, line: str) -> Any:
        """
        Принимает одну строку морфемы.
        Возвращает запись морфемы или бросает ParseError.
        Реализация должна быть детерминированной и без побочных эффектов.
        """
        pass

    def __call__(self, line: str) -> Any:
        return self.parse_line(line)


class BaseAnalyzer(ABC):
    @abstractmethod
    def process(self, text: str) -> List[BList]:
        """
        Принимает сырой текст (одно предложение на строку).
        Возвращает список разобранных предложений.
        """
        pass
