# knp_tree/core/data_structures.py
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, Dict, List, Literal, Optional, Tuple


class FrozenDict(dict):
    """
    Неизменяемый словарь для признаков и аргументов.
    Остаётся подклассом dict, поэтому pydantic сериализует его как обычный
    словарь, а сравнение с dict работает как прежде.
    """

    def _readonly(self, *args, **kwargs):
        raise TypeError(f"'{type(self).__name__}' object is immutable")

    __setitem__ = _readonly
    __delitem__ = _readonly
    __ior__ = _readonly
    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly

    def __hash__(self):
        return hash(frozenset(self.items()))

    def __reduce__(self):
        return type(self), (dict(self),)

    def __repr__(self):
        return f"FrozenDict({dict.__repr__(self)})"


def _freeze(value: Dict[str, Any]) -> FrozenDict:
    return value if isinstance(value, FrozenDict) else FrozenDict(value)


class Morpheme(BaseModel):
    """
    Морфема в формате Juman (одна строка вывода KNP -tab).
    Дерево не зависит от этой формы: Tag.morphemes хранит то,
    что вернул внедрённый парсер морфем.
    """
    model_config = ConfigDict(frozen=True)

    surface: str
    reading: str
    lemma: str
    pos: str
    pos_id: int
    subpos: str
    subpos_id: int
    conj_type: str
    conj_type_id: int
    conj_form: str
    conj_form_id: int

    # "代表表記:食べる/たべる ..." или NIL
    semantic_info: str = ""
    features: Dict[str, str] = Field(default_factory=FrozenDict)
    rep_name: Optional[str] = None

    @field_validator("features", mode="after")
    @classmethod
    def freeze_features(cls, value):
        return _freeze(value)


class Argument(BaseModel):
    """Аргумент падежной рамки: одна группа "ガ/C/太郎/0/-1/5"."""
    model_config = ConfigDict(frozen=True)

    case: str
    arg_type: str
    phrase: str
    index: int
    target: str


class Pas(BaseModel):
    """Предикатно-аргументная структура (格解析結果)."""
    model_config = ConfigDict(frozen=True)

    cfid: str
    arguments: Dict[str, Argument] = Field(default_factory=FrozenDict)

    @field_validator("arguments", mode="after")
    @classmethod
    def freeze_arguments(cls, value):
        return _freeze(value)


class Rel(BaseModel):
    model_config = ConfigDict(frozen=True)

    rel_type: str
    target: str
    sid: Optional[str] = None
    mode: Optional[str] = None
    id: Optional[int] = None


class Tag(BaseModel):
    """
    Базовая фраза (基本句). Строка "+ <parent><type> <fstring>" плюс
    строки морфем под ней.
    """
    model_config = ConfigDict(frozen=True)

    parent_id: int  # -1 для корня
    dpndtype: str
    fstring: str
    morphemes: Tuple[Any, ...] = ()
    features: Dict[str, str] = Field(default_factory=FrozenDict)
    rels: Tuple[Rel, ...] = ()
    pas: Optional[Pas] = None

    @field_validator("features", mode="after")
    @classmethod
    def freeze_features(cls, value):
        return _freeze(value)

    @property
    def surface(self) -> str:
        return "".join(getattr(m, "surface", "") for m in self.morphemes)


class Bunsetsu(BaseModel):
    """Фразовая единица (文節), содержит хотя бы одну базовую фразу."""
    model_config = ConfigDict(frozen=True)

    parent_id: int
    dpndtype: Literal["D", "P", "I", "A"]
    fstring: str
    rep_name: Optional[str] = None
    tags: Tuple[Tag, ...]

    @model_validator(mode='after')
    def check_tags(self):
        if not self.tags:
            raise ValueError(f"Bunsetsu without tags: '{self.fstring}'")
        return self

    @property
    def morphemes(self) -> List[Any]:
        return [m for tag in self.tags for m in tag.morphemes]

    @property
    def surface(self) -> str:
        return "".join(tag.surface for tag in self.tags)


class BList(BaseModel):
    """
    Результат разбора одного предложения.
    Порядок bunsetsus совпадает с порядком строк во входе.
    """
    model_config = ConfigDict(frozen=True)

    breaking_pattern: str
    comment: str = ""
    sid: str = ""
    bunsetsus: Tuple[Bunsetsu, ...] = ()

    def __len__(self):
        return len(self.bunsetsus)

    @property
    def tags(self) -> List[Tag]:
        return [tag for bnst in self.bunsetsus for tag in bnst.tags]

    @property
    def morphemes(self) -> List[Any]:
        return [m for tag in self.tags for m in tag.morphemes]
