import logging
import re
from typing import Dict

from knp_tree.core.data_structures import Morpheme
from knp_tree.core.errors import ParseError
from knp_tree.core.interfaces import BaseMorphemeParser

logger = logging.getLogger(__name__)

# Пробел в поверхностной форме Juman экранирует как "\ "
ESCAPED_SPACE = "\\ "
_FIELD = r"((?:\\ |[^ ])+)"

MORPHEME_REGEX = re.compile(
    rf"^{_FIELD} {_FIELD} {_FIELD} (\S+) (\d+) (\S+) (\d+) (\S+) (\d+) (\S+) (\d+)(?: (.*))?$"
)
SEMANTIC_INFO_REGEX = re.compile(r'^(?:"([^"]*)"|(NIL))\s*(.*)$')
FEATURE_REGEX = re.compile(r"<([^<>]+)>")
REP_NAME_REGEX = re.compile(r"代表表記:([^\"\s]+)")


class JumanParser(BaseMorphemeParser):
    """
    Парсер строки морфемы Juman/KNP:

        食べる たべる 食べる 動詞 2 * 0 母音動詞 1 基本形 2 "代表表記:食べる/たべる" <...>

    11 обязательных полей, затем необязательные семантическая информация
    ("..." или NIL) и признаки <...>.
    """

    def parse_line(self, line: str) -> Morpheme:
        m = MORPHEME_REGEX.match(line.strip())
        if m is None:
            logger.debug(f"Rejected morpheme line: {line}")
            raise ParseError(f"Illegal morpheme spec: {line}")

        rest = m.group(12) or ""
        semantic_info = ""
        sm = SEMANTIC_INFO_REGEX.match(rest)
        if sm:
            semantic_info = sm.group(1) if sm.group(1) is not None else sm.group(2)
            rest = sm.group(3)

        features = self._parse_features(rest)

        rep_match = REP_NAME_REGEX.search(semantic_info)
        if rep_match:
            rep_name = rep_match.group(1)
        else:
            rep_name = features.get("代表表記") or features.get("正規化代表表記")

        return Morpheme(
            surface=_unescape(m.group(1)),
            reading=_unescape(m.group(2)),
            lemma=_unescape(m.group(3)),
            pos=m.group(4),
            pos_id=int(m.group(5)),
            subpos=m.group(6),
            subpos_id=int(m.group(7)),
            conj_type=m.group(8),
            conj_type_id=int(m.group(9)),
            conj_form=m.group(10),
            conj_form_id=int(m.group(11)),
            semantic_info=semantic_info,
            features=features,
            rep_name=rep_name,
        )

    def _parse_features(self, fstring: str) -> Dict[str, str]:
        features = {}
        for feature in FEATURE_REGEX.findall(fstring):
            key, _, value = feature.partition(":")
            features[key] = value
        return features


def _unescape(field: str) -> str:
    return field.replace(ESCAPED_SPACE, " ")
