# knp_tree/ingestion/loader.py
import logging
from pathlib import Path
from typing import Generator, Optional, Union

from knp_tree.core.data_structures import BList
from knp_tree.core.errors import ParseError
from knp_tree.ingestion.utils import iter_sentence_blocks
from knp_tree.parsers.knp_parser import KNPParser

logger = logging.getLogger(__name__)


class KNPFileLoader:
    """Загрузчик файлов с сохранённым выводом KNP (-tab)."""

    def __init__(self, path: Union[str, Path], parser: Optional[KNPParser] = None, skip_invalid: bool = False):
        self.path = Path(path)
        self.parser = parser or KNPParser()
        self.skip_invalid = skip_invalid

    def load_stream(self) -> Generator[BList, None, None]:
        """
        Потоковый генератор разобранных предложений.
        Файл читается лениво, по строкам.
        """
        logger.info(f"Parsing KNP file: {self.path.name}")
        count = 0
        skipped = 0

        with open(self.path, "r", encoding="utf-8") as f:
            for block in iter_sentence_blocks(f, self.parser.breaking_pattern):
                try:
                    blist = self.parser.parse(block)
                except ParseError as e:
                    if not self.skip_invalid:
                        logger.error(f"Failed to parse sentence #{count + skipped + 1} in {self.path.name}: {e}")
                        raise
                    skipped += 1
                    logger.warning(f"Skipped invalid sentence in {self.path.name}: {e}")
                    continue

                count += 1
                yield blist

        logger.info(f"Loaded {count} sentences from {self.path.name} (skipped: {skipped})")
