from sprig.types.symbol import Symbol
from sprig.types.nil import Nil, NilType
from sprig.types.pair import Pair, is_list, to_list, reverse
from sprig.types.values import Unspecified, Void, Primitive
from sprig.types.environment import Frame
from sprig.types.lambda_fn import Closure
from sprig.types.token import Token, TokenKind

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Pair",
    "is_list",
    "to_list",
    "reverse",
    "Unspecified",
    "Void",
    "Primitive",
    "Frame",
    "Closure",
    "Token",
    "TokenKind",
]
