import os

from typing import Text


SCHEMA_PATH = os.path.join(os.path.dirname(__file__), 'schema.graphql')


def load_type_defs(path: Text = None) -> Text:
    """
    Return the GraphQL SDL text of the Author/Post schema.
    """
    with open(path or SCHEMA_PATH, 'r', encoding='utf-8') as sdl_file:
        return sdl_file.read()
