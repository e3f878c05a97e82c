from myshell.rename.engine import (
    NameBuilder, FileMatch, RenameEntry, RenamePlan,
    compile_mask, select_files, build_plan, first_problem,
)
__all__ = [
    "NameBuilder", "FileMatch", "RenameEntry", "RenamePlan",
    "compile_mask", "select_files", "build_plan", "first_problem",
]
