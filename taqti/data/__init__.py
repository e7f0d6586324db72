from .lexicon import Lexicon, DEFAULT_LEXICON, normalize_text
from .meter_table import MeterTable, DEFAULT_METER_TABLE, METER_DEFINITIONS

__all__ = ['Lexicon', 'DEFAULT_LEXICON', 'normalize_text',
           'MeterTable', 'DEFAULT_METER_TABLE', 'METER_DEFINITIONS']
