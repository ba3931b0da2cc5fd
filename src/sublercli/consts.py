"""Constants for invoking SublerCLI."""

# Homebrew's install location. Check with `brew info --cask sublercli`.
DEFAULT_CLI_PATH = "/usr/local/bin/SublerCli"
CLI_PATH_ENVVAR = "SUBLER_CLI_PATH"

SOURCE_FLAG = "-source"
DEST_FLAG = "-dest"
METADATA_FLAG = "-metadata"
OPTIMIZE_FLAG = "-optimize"

# Upper bound on `name.0.ext`, `name.1.ext`, ... candidates tried for a free destination
MAX_DEST_ATTEMPTS = 10_000
