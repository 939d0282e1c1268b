from .misc_functions import (
    get_class_name,
    is_sequence,
    flatten_sequence,
    random_id,
)
