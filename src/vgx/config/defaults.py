"""Starter .vgx.toml template written by ``vgx init``."""

DEFAULT_TOML = """\
# vgx configuration
version = "1.0"

[detect]
threshold = 70            # percent (0-100); files scoring at or above are flagged as AI

[walk]
# extensions = [".py", ".go", ".ts"]        # empty = built-in source extensions
# skip_dirs = ["node_modules", ".git"]      # empty = built-in skip-list

[patterns]
# disable = ["inline_explanation"]
# custom_dir = ".vgx-patterns"              # YAML files with extra weighted patterns

[output]
format = "text"           # text | json
show_patterns = false
"""
