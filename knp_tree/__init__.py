from knp_tree import config
from knp_tree.core.errors import ParseError
from knp_tree.core.data_structures import Argument, BList, Bunsetsu, Morpheme, Pas, Rel, Tag
from knp_tree.parsers.features import parse_features, parse_pas, parse_rel
from knp_tree.parsers.juman_parser import JumanParser
from knp_tree.parsers.knp_parser import KNPParser

__all__ = [
    'config',
    'ParseError',
    'Argument',
    'BList',
    'Bunsetsu',
    'Morpheme',
    'Pas',
    'Rel',
    'Tag',
    'parse_features',
    'parse_pas',
    'parse_rel',
    'JumanParser',
    'KNPParser',
]
