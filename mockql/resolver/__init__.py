from .bindings import ResolverBindings, resolver
