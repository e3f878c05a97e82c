"""MyShell — interactive file-system command shell."""

VERSION = "1.0.0"
