"""
PatrolLink NLP Layer
English/Urdu utterance → structured commands → instruction tokens.
"""

from nlp.command_parser import CommandParser, parse
from nlp.commands import Command, CommandDescriptor
from nlp.context import ContextMemory
from nlp.lowering import lower
from nlp.normalizer import normalize
from nlp.quantity import Quantity, extract_quantity
from nlp.segmenter import split_clauses
from nlp.session import CommandSession, ParseResult, SessionRegistry
