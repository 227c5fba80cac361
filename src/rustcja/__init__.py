"""rustcja - Japanese translation layer for rustc JSON diagnostics."""

import logging

__version__ = "0.1.0"

# stderr is the diagnostic channel; never fall back to logging there
logging.getLogger(__name__).addHandler(logging.NullHandler())
