"""Exit codes for the endorscan CLI.

- 0: Success
- 2: endorctl scan failed
- 3: Invalid usage (bad arguments, missing or invalid inputs)
- 4: Bootstrap failure (endorctl could not be provisioned)
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_SCANNER_ERROR = 2
EXIT_INVALID_USAGE = 3
EXIT_BOOTSTRAP_FAILURE = 4
