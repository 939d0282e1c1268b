from .predicate import (
    Predicate,
    ConditionalPredicate,
    BooleanPredicate,
    CallablePredicate,
    Field,
    where,
)
