from setuptools import setup, find_packages

setup(
    name="myshell",
    version="1.0.0",
    description="MyShell — interactive file-system command shell.",
    long_description="""MyShell features:
- Fixed set of commands: ls, copy, cat, tree, charsets, hexdump, mkdir, massrename
- Working directory with cd/pwd and a pushd/popd/listd/dropd directory stack
- Multi-line input: end a line with the MORELINES symbol to continue it
- Prompt, MORELINES and MULTILINE symbols changeable at runtime with 'symbol'
- Quoted path arguments with \\" and \\\\ escapes
- Rich output for tree and help, prompt_toolkit line editing on a terminal
""",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "rich>=13.7.0",
        "click>=8.1.0",
        "prompt_toolkit>=3.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "myshell=myshell.CLI:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
