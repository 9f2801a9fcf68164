from .option import (
    Option,
    Some,
    NOTHING,
    absent,
    present,
    is_present,
    is_absent,
    value_or,
    map,
    chain,
    and_,
    or_,
    from_nullable,
    to_nullable,
)
from . import nullable
