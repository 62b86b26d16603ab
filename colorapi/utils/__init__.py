from .default import value_or_default, zero_none
from .num_utils import is_real_number, format_number
