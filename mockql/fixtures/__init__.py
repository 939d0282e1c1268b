from .generator import FixtureGenerator, build_store
