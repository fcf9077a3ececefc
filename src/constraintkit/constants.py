"""
Operator constants of the universal artifact dict form shared by all compilers.
"""


class Operator:
    EQ = "$eq"
    LT = "$lt"
    LTE = "$lte"
    GT = "$gt"
    GTE = "$gte"
    EXISTS = "$exists"
    AND = "$and"
    OR = "$or"


RANGE_OPERATORS = {Operator.LT, Operator.LTE, Operator.GT, Operator.GTE}
