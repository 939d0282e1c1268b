from .harness import MockHarness
