"""Application-wide constants."""

# Version info
APP_NAME = "Truffle Config"
APP_DESCRIPTION = "Solidity compiler settings for the Truffle build tool"

# Compiler defaults
COMPILER_NAME = "solc"
DEFAULT_SOLC_VERSION = "0.8.4"
DEFAULT_OPTIMIZER_ENABLED = True

# Disabled test network (kept commented out in truffle-config.js)
TEST_NETWORK_NAME = "test"
TEST_NETWORK_HOST = "127.0.0.1"
TEST_NETWORK_PORT = 9545
TEST_NETWORK_ID = "*"  # Match any network id

# Output
JS_INDENT = "  "

# Logging
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_FILE_BACKUP_COUNT = 5
