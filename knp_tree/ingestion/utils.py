# knp_tree/ingestion/utils.py
import re
from typing import Iterable, Iterator, List, Union

from knp_tree.config import DEFAULT_BREAKING_PATTERN


def iter_sentence_blocks(
        lines: Iterable[str],
        breaking_pattern: Union[str, "re.Pattern[str]"] = DEFAULT_BREAKING_PATTERN
) -> Iterator[List[str]]:
    """
    Режет поток вывода KNP на предложения.

    Строка конца предложения (EOS) закрывает блок и входит в него,
    так что каждый блок можно передать в KNPParser.parse как есть.
    Незакрытый хвост потока отдаётся последним блоком, если в нём
    есть непустые строки.
    """
    if isinstance(breaking_pattern, str):
        breaking_pattern = re.compile(breaking_pattern)

    buf = []
    for line in lines:
        line = line.rstrip("\n\r")
        buf.append(line)
        if breaking_pattern.search(line.strip()):
            yield buf
            buf = []

    if any(l.strip() for l in buf):
        yield buf
