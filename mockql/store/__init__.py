from .relational_store import RelationalStore
