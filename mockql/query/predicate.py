from functools import reduce
from typing import Dict, Text, Callable

from mockql.util.misc_functions import flatten_sequence, get_class_name
from mockql.constants import OP_CODE


AND_FUNC = lambda x, y: x & y


class Predicate(object):
    """
    A Predicate is a boolean test applied to a single store record. Calling
    a Predicate with a record dict returns True if the record satisfies it.
    """

    def __call__(self, record: Dict) -> bool:
        return self.evaluate(record)

    def __and__(self, other):
        return BooleanPredicate(OP_CODE.AND, self, Predicate.build(other))

    def evaluate(self, record: Dict) -> bool:
        raise NotImplementedError()

    @classmethod
    def build(cls, obj) -> 'Predicate':
        """
        Coerce `obj` into a Predicate. `None` matches every record, a dict is
        read as a conjunction of field equalities and any other callable is
        applied to the record as-is.
        """
        if obj is None:
            return CallablePredicate(lambda record: True)
        if isinstance(obj, Predicate):
            return obj
        if isinstance(obj, dict):
            return where(**obj)
        if callable(obj):
            return CallablePredicate(obj)
        raise ValueError(f'cannot build predicate from {obj!r}')

    @staticmethod
    def reduce_and(*predicates) -> 'Predicate':
        predicates = flatten_sequence(p for p in predicates if p is not None)
        if not predicates:
            return None
        return reduce(AND_FUNC, predicates)


class ConditionalPredicate(Predicate):
    """
    Equality between the value of a named record field and a constant.
    A record without the field never matches.
    """

    def __init__(self, field: Text, value):
        self.op = OP_CODE.EQ
        self.field = field
        self.value = value

    def __repr__(self):
        return f'{get_class_name(self)}({self.field} == {self.value!r})'

    def __str__(self):
        return f'({self.field} == {self.value!r})'

    def evaluate(self, record: Dict) -> bool:
        if record is None or self.field not in record:
            return False
        return record[self.field] == self.value


class BooleanPredicate(Predicate):
    """
    Conjunction of two child predicates. LHS and RHS stand for "left-hand
    side" and "right-hand side", respectively.
    """

    def __init__(self, op, lhs: Predicate, rhs: Predicate):
        self.op = op
        self.lhs = lhs
        self.rhs = rhs

    def __repr__(self):
        return f'{get_class_name(self)}({self.lhs} {self.op} {self.rhs})'

    def __str__(self):
        return f'({self.lhs} && {self.rhs})'

    def evaluate(self, record: Dict) -> bool:
        if self.op == OP_CODE.AND:
            return self.lhs(record) and self.rhs(record)
        raise ValueError(f'unrecognized predicate operator: {self.op}')


class CallablePredicate(Predicate):
    """
    Wraps an arbitrary `record -> bool` function.
    """

    def __init__(self, func: Callable):
        self.func = func

    def __repr__(self):
        return f'{get_class_name(self)}({getattr(self.func, "__name__", "callable")})'

    def evaluate(self, record: Dict) -> bool:
        return bool(self.func(record))


class Field(object):
    """
    Named handle on a record field, used to build equality predicates, as in
    `Field('author') == author_id`.
    """

    def __init__(self, name: Text):
        self.name = name

    def __repr__(self):
        return f'Field({self.name})'

    def __hash__(self):
        return hash(self.name)

    def __eq__(self, value):
        return ConditionalPredicate(self.name, value)


def where(**equalities) -> Predicate:
    """
    Return the conjunction of `field == value` for each keyword argument.
    With no arguments, the returned predicate matches every record.
    """
    predicate = Predicate.reduce_and(*[
        Field(k) == v for k, v in equalities.items()
    ])
    return predicate if predicate is not None else Predicate.build(None)
