import uuid

from types import GeneratorType
from typing import List, Text


DictKeySet = type({}.keys())
DictValueSet = type({}.values())


def is_sequence(obj) -> bool:
    """
    Return True if obj is a generic sequence type, like a list or tuple.
    """
    return isinstance(obj, (list, tuple, set, DictKeySet, DictValueSet))


def get_class_name(obj):
    if not obj:
        return None
    if isinstance(obj, type):
        return obj.__name__
    else:
        return obj.__class__.__name__


def flatten_sequence(seq) -> List:
    flattened = []
    if not seq:
        return flattened
    for obj in seq:
        if is_sequence(obj):
            flattened.extend(flatten_sequence(obj))
        elif isinstance(obj, GeneratorType):
            flattened.extend(list(obj))
        else:
            flattened.append(obj)
    return flattened


def random_id() -> Text:
    """
    Return a new random record id.
    """
    return str(uuid.uuid4())
