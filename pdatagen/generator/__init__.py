"""pdatagen code generator."""

from .config import GeneratorConfig as GeneratorConfig
from .fields import FIELD_TYPES as FIELD_TYPES
from .fields import Field as Field
from .fields import MessagePointerField as MessagePointerField
from .fields import MessageValueField as MessageValueField
from .fields import OneofField as OneofField
from .fields import PrimitiveField as PrimitiveField
from .fields import SliceField as SliceField
from .fields import TypedPrimitiveField as TypedPrimitiveField
from .files import File as File
from .files import write_files as write_files
from .stats import CatalogStats as CatalogStats
from .stats import calculate_stats as calculate_stats
from .structs import MessagePtrStruct as MessagePtrStruct
from .structs import MessageValueStruct as MessageValueStruct
from .structs import SliceStruct as SliceStruct
from .structs import Struct as Struct
from .templating import UnresolvedPlaceholderError as UnresolvedPlaceholderError
from .templating import expand as expand
from .types import *
from .validation import ValidationError as ValidationError
from .validation import validate as validate
