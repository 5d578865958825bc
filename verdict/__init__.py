"""verdict: explicit success/failure values instead of raised exceptions.

Main components:
* `Ok` / `Err`: the two variants of `Result`
* `ok` / `err`: constructors
* `from_awaitable`, `from_future`: capture async outcomes as Results
* `attempt`, `run_in_thread`: capture plain function outcomes as Results
"""

# Version info
__version__ = "0.1.0"

# Core components
from verdict.core.result import Ok, Err, Result, ok, err
from verdict.core.deferred import from_awaitable, from_future, attempt, run_in_thread
from verdict.core.errors import ResultError, UnwrapError, Rejection

# Settings
from verdict.config import Settings, get_settings, configure

# Export all important symbols
__all__ = [
    # Variants
    "Ok",
    "Err",
    "Result",

    # Functions
    "ok",
    "err",
    "from_awaitable",
    "from_future",
    "attempt",
    "run_in_thread",

    # Errors
    "ResultError",
    "UnwrapError",
    "Rejection",

    # Config
    "Settings",
    "get_settings",
    "configure",
]
