# knp_tree/engines/knp_engine.py
import logging
import subprocess
from typing import List, Optional, Sequence

from knp_tree import config
from knp_tree.core.data_structures import BList
from knp_tree.core.interfaces import BaseAnalyzer
from knp_tree.parsers.knp_parser import KNPParser

logger = logging.getLogger(__name__)


class KNPEngine(BaseAnalyzer):
    """
    Обёртка над конвейером "juman | knp -tab".
    Каждая непустая строка входного текста - отдельное предложение.
    """

    def __init__(
            self,
            juman_command: Optional[Sequence[str]] = None,
            knp_command: Optional[Sequence[str]] = None,
            timeout: float = config.PROCESS_TIMEOUT,
            parser: Optional[KNPParser] = None,
    ):
        self.juman_command = list(juman_command or config.JUMAN_COMMAND)
        self.knp_command = list(knp_command or config.KNP_COMMAND)
        self.timeout = timeout
        self.parser = parser or KNPParser()

    @classmethod
    def from_settings(cls, settings: dict) -> "KNPEngine":
        engine_cfg = settings.get("engine", {})
        parser_cfg = settings.get("parser", {})
        return cls(
            juman_command=engine_cfg.get("juman_command"),
            knp_command=engine_cfg.get("knp_command"),
            timeout=engine_cfg.get("timeout", config.PROCESS_TIMEOUT),
            parser=KNPParser(parser_cfg.get("breaking_pattern", config.DEFAULT_BREAKING_PATTERN)),
        )

    def process(self, text: str) -> List[BList]:
        lines = [l.strip() for l in text.splitlines() if l.strip()]
        if not lines:
            return []

        juman_output = self._run(self.juman_command, "\n".join(lines) + "\n")
        knp_output = self._run(self.knp_command, juman_output)

        sentences = list(self.parser.parse_stream(knp_output.splitlines()))
        logger.info(f"KNP analysed {len(sentences)} sentences")
        return sentences

    def _run(self, command: List[str], stdin_text: str) -> str:
        logger.debug(f"Running {' '.join(command)}")
        try:
            result = subprocess.run(
                command,
                input=stdin_text,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True
            )
        except FileNotFoundError as e:
            logger.error(f"Command not found: {command[0]}")
            raise RuntimeError(f"Command not found: {command[0]}") from e
        except subprocess.TimeoutExpired as e:
            logger.error(f"{command[0]} timed out after {self.timeout}s")
            raise RuntimeError(f"{command[0]} timed out") from e
        except subprocess.CalledProcessError as e:
            logger.error(f"{command[0]} failed: {(e.stderr or '')[:200]}")
            raise RuntimeError(f"{command[0]} exited with code {e.returncode}") from e

        return result.stdout
