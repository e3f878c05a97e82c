from myshell.tools.file_manager import (
    list_directory, walk_tree, file_read, hex_dump, list_charsets,
    copy_target, file_copy, create_directory, file_rename, ToolResult,
)
__all__ = [
    "list_directory","walk_tree","file_read","hex_dump","list_charsets",
    "copy_target","file_copy","create_directory","file_rename","ToolResult",
]
