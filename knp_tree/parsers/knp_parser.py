"""
Парсер вывода KNP (-tab) в дерево BList -> Bunsetsu -> Tag -> морфемы.

Строки предложения:

    # S-ID:1 KNP:4.2
    * -1D <文頭><文末>...
    + -1D <文頭><格解析結果:...>...
    食べる たべる 食べる 動詞 2 * 0 母音動詞 1 基本形 2 "代表表記:食べる/たべる"
    EOS

Любая ошибка обрывает разбор всего предложения (ParseError).
"""
import logging
import re
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

from knp_tree import config
from knp_tree.core.data_structures import BList, Bunsetsu, Tag
from knp_tree.core.errors import ParseError
from knp_tree.ingestion.utils import iter_sentence_blocks
from knp_tree.parsers.features import parse_features
from knp_tree.parsers.juman_parser import JumanParser

logger = logging.getLogger(__name__)

SID_REGEX = re.compile(r"# S-ID:([^\s]*).*$")
BUNSETSU_REGEX = re.compile(r"\* (-?\d+)([DPIA])(.*)$")
BUNSETSU_REP_NAME_REGEX = re.compile(r'<正規化代表表記:([^"\s]+?)>')
TAG_REGEX = re.compile(r"\+ (-?\d+)(\w)(.*)$")

T = TypeVar("T")


class KNPParser:
    """
    Разбор одного предложения KNP.

    Аргументы:
        breaking_pattern: шаблон конца предложения (строка или re.Pattern).
            Строка, на которой шаблон найден, и всё после неё отбрасываются.
        morpheme_parser: функция line -> морфема; ошибку сообщает через ParseError.
            По умолчанию JumanParser.
    """

    def __init__(
            self,
            breaking_pattern: Union[str, "re.Pattern[str]"] = config.DEFAULT_BREAKING_PATTERN,
            morpheme_parser: Optional[Callable[[str], object]] = None,
    ):
        if isinstance(breaking_pattern, str):
            breaking_pattern = re.compile(breaking_pattern)
        self.breaking_pattern = breaking_pattern
        self.morpheme_parser = morpheme_parser or JumanParser()

    def parse(self, lines: Iterable[str]) -> BList:
        relevant_lines = self.filter_lines(lines)

        comment, sid = "", ""
        comment_lines = [l for l in relevant_lines if l.startswith(config.COMMENT_MARKER)]
        if comment_lines:
            comment = comment_lines[0]
            m = SID_REGEX.fullmatch(comment)
            sid = m.group(1) if m else ""
            if len(comment_lines) > 1:
                logger.debug(f"{len(comment_lines)} comment lines found, using the first: {comment}")

        # Первая строка - заголовок предложения
        bunsetsus = self.parse_node_lines(config.BUNSETSU_MARKER, relevant_lines[1:], self.parse_bunsetsu)

        logger.debug(f"Parsed sentence '{sid}': {len(bunsetsus)} bunsetsu")
        return BList(
            breaking_pattern=self.breaking_pattern.pattern,
            comment=comment,
            sid=sid,
            bunsetsus=tuple(bunsetsus),
        )

    def parse_stream(self, lines: Iterable[str], skip_invalid: bool = False) -> Iterator[BList]:
        """
        Потоковый разбор вывода с несколькими предложениями.
        При skip_invalid=True ошибочные предложения логируются и пропускаются.
        """
        for block in iter_sentence_blocks(lines, self.breaking_pattern):
            try:
                yield self.parse(block)
            except ParseError as e:
                if not skip_invalid:
                    raise
                logger.warning(f"Skipped invalid sentence: {e}")

    def filter_lines(self, lines: Iterable[str]) -> List[str]:
        relevant_lines = []
        for line in lines:
            line = line.strip()
            if not line:
                continue
            if self.breaking_pattern.search(line):
                break
            if line.startswith(config.EOS_MARKER):
                continue
            relevant_lines.append(line)

        for line in relevant_lines:
            if line.startswith(config.ERROR_MARKER):
                logger.error(f"KNP reported an error: {line}")
                raise ParseError(f"Error found line starting with ';;': {line}")

        return relevant_lines

    def parse_bunsetsu(self, lines: Sequence[str]) -> Bunsetsu:
        tags = self.parse_node_lines(config.TAG_MARKER, lines[1:], self.parse_tag)
        if not tags:
            raise ParseError(f"Bunsetsu without tags: {list(lines)}")

        parsed = self.parse_line(lines[0], BUNSETSU_REGEX)
        if parsed is None:
            raise ParseError(f"Illegal bunsetsu spec: {list(lines)}")

        parent_id, dpndtype, fstring = parsed
        rep_match = BUNSETSU_REP_NAME_REGEX.search(fstring)
        return Bunsetsu(
            parent_id=parent_id,
            dpndtype=dpndtype,
            fstring=fstring,
            rep_name=rep_match.group(1) if rep_match else None,
            tags=tuple(tags),
        )

    def parse_tag(self, lines: Sequence[str]) -> Tag:
        morphemes = [self.morpheme_parser(line) for line in lines[1:]]

        parsed = self.parse_line(lines[0], TAG_REGEX)
        if parsed is None:
            raise ParseError(f"Illegal tag spec: {list(lines)}")

        parent_id, dpndtype, fstring = parsed
        features, rels, pas = parse_features(fstring, ignore_first_character=False)
        return Tag(
            parent_id=parent_id,
            dpndtype=dpndtype,
            fstring=fstring,
            morphemes=tuple(morphemes),
            features=features,
            rels=tuple(rels),
            pas=pas,
        )

    def parse_node_lines(
            self,
            prefix: str,
            lines: Sequence[str],
            parse_node: Callable[[Sequence[str]], T]
    ) -> List[T]:
        """
        Группирует строки в узлы: каждый узел начинается со строки с prefix
        и продолжается до следующей такой строки.
        Первая ошибка parse_node прерывает разбор.
        """
        nodes = []
        pos = 0
        while pos < len(lines):
            if not lines[pos].startswith(prefix):
                raise ParseError(f"Invalid line while parsing KNP node: {list(lines[pos:])}")

            end = pos + 1
            while end < len(lines) and not lines[end].startswith(prefix):
                end += 1

            nodes.append(parse_node(lines[pos:end]))
            pos = end

        return nodes

    @staticmethod
    def parse_line(line: str, line_pattern: "re.Pattern[str]") -> Optional[Tuple[int, str, str]]:
        """Заголовок узла -> (parent_id, dpndtype, fstring) или None."""
        l = line.strip()
        if len(l) == 1:
            return None

        m = line_pattern.search(l)
        if m is None:
            return None
        return int(m.group(1)), m.group(2), m.group(3).strip()
