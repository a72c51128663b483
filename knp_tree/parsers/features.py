"""
Разбор строки признаков KNP: "<文頭><ガ><格解析結果:...><rel type=... />".

Строка режется по "><" на фрагменты; фрагменты rel превращаются в Rel,
остальные ложатся в словарь ключ -> значение, а 格解析結果 дополнительно
разбирается в предикатно-аргументную структуру (Pas).
"""
import logging
import re
from typing import Dict, List, Optional, Tuple

from knp_tree.config import CASE_ANALYSIS_KEY
from knp_tree.core.data_structures import Argument, Pas, Rel
from knp_tree.core.errors import ParseError

logger = logging.getLogger(__name__)

REL_REGEX = re.compile(
    r'rel type="([^\s]+?)"(?: mode="([^>]+?)")? target="([^\s]+?)"(?: sid="(.+?)" id="(.+?)")?/'
)

# Заглушка KNP: цель отношения не определена
UNSET_TARGET = "？"

WRITER_READER_LIST = {"著者", "読者"}
WRITER_READER_CONV_LIST = {"一人称": "著者", "二人称": "読者"}

# Значения второго поля аргумента, при которых аргумент отбрасывается
SKIPPED_ARG_TYPES = {"U", "-"}


def parse_features(
        fstring: str,
        ignore_first_character: bool = False
) -> Tuple[Dict[str, str], List[Rel], Optional[Pas]]:
    """
    Разбирает строку признаков базовой фразы.

    Аргументы:
        fstring: хвост строки "+ ..." после типа зависимости.
        ignore_first_character: сохранён для совместимости интерфейса,
            на результат не влияет.

    Возвращает: (features, rels, pas).
    При повторе ключа в features остаётся последнее значение.
    """
    spec = fstring.rstrip()
    # Внешняя пара скобок не входит во фрагменты
    if spec.startswith("<"):
        spec = spec[1:]
    if spec.endswith(">"):
        spec = spec[:-1]

    features: Dict[str, str] = {}
    rels: List[Rel] = []
    pas: Optional[Pas] = None

    if not spec:
        return features, rels, pas

    for feature in spec.split("><"):
        if feature.startswith("rel"):
            rel = parse_rel(feature)
            if rel is not None:
                rels.append(rel)
        else:
            key, _, value = feature.partition(":")
            features[key] = value
            if key == CASE_ANALYSIS_KEY:
                pas = parse_pas(value)

    return features, rels, pas


def parse_rel(fstring: str, consider_writer_reader: bool = False) -> Optional[Rel]:
    """
    Извлекает одно отношение из фрагмента rel.

    Число групп считается по последней захваченной группе (m.lastindex):
    5 при наличии sid/id, 3 без них (mode учитывается по позиции).
    Основной вариант требует не меньше четырёх групп и цели не "？".
    При consider_writer_reader=True допускается запасной вариант без sid:
    цель из словаря автор/читатель, нормализованная через
    WRITER_READER_CONV_LIST (一人称 -> 著者, 二人称 -> 読者).
    """
    for m in REL_REGEX.finditer(fstring):
        rel_type, mode, target, sid, rel_id = m.groups()
        group_count = m.lastindex or 0

        if group_count >= 4 and target != UNSET_TARGET:
            return Rel(
                rel_type=rel_type,
                target=target,
                sid=sid,
                mode=mode,
                id=_to_int(rel_id),
            )

        if consider_writer_reader and group_count >= 3 and target != UNSET_TARGET and (
                target in WRITER_READER_LIST or target in WRITER_READER_CONV_LIST):
            normalized = target if target in WRITER_READER_LIST else WRITER_READER_CONV_LIST[target]
            return Rel(rel_type=rel_type, target=normalized, mode=mode)

    return None


def parse_pas(value: str) -> Optional[Pas]:
    """
    Разбирает значение 格解析結果: "<cf0>:<cf1>:<группа>;<группа>;...".

    Меньше трёх сегментов по ":" означает отсутствие рамки (None).
    Группа "падеж/тип/фраза/индекс/?/цель" попадает в аргументы, если в ней
    больше пяти полей и тип не U и не "-".
    """
    cs = value.split(":")
    if len(cs) < 3:
        return None

    cfid = cs[0] + cs[1]
    arguments: Dict[str, Argument] = {}

    for group in "".join(cs[2:]).split(";"):
        items = group.split("/")
        if len(items) <= 5 or items[1] in SKIPPED_ARG_TYPES:
            continue
        try:
            index = int(items[3])
        except ValueError as e:
            raise ParseError(f"Illegal argument index '{items[3]}' in case analysis: {value}") from e

        arguments[items[0]] = Argument(
            case=items[0],
            arg_type=items[1],
            phrase=items[2],
            index=index,
            target=items[5],
        )

    return Pas(cfid=cfid, arguments=arguments)


def _to_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Non-integer rel id ignored: {value}")
        return None
