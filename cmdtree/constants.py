# -*- coding: utf-8 -*-

__all__ = ["DEFAULT_MAX_DEPTH", "MAX_DEPTH_ENV", "LOG_FILE_ENV", "OUTPUT_FORMATS",
           "DEFAULT_OUTPUT_FORMAT", "CONSOLE_PROMPT", "CONSOLE_PROMPT_MORE"]

# Maximum number of nested subshells
DEFAULT_MAX_DEPTH = 128

MAX_DEPTH_ENV = "CMDTREE_MAX_DEPTH"
LOG_FILE_ENV = "CMDTREE_LOG_FILE"

OUTPUT_FORMATS = ("tree", "json", "text")
DEFAULT_OUTPUT_FORMAT = "tree"

CONSOLE_PROMPT = "cmdtree> "
CONSOLE_PROMPT_MORE = "...> "
