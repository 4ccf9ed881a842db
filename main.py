import sys

from rich.pretty import pprint

from flagdoc import process_flags


options = {
    "preamble": "Usage: site-builder [options] [pages...]",
    "description": {
        "clean": "Clean output directory before processing",
        "drafts": "Include drafts in output",
        "input": "Input directory",
        "output": "Output directory",
        "serve": "Serve web site, with automatic reloading",
        "watch": "Watch for changes and rebuild automatically",
    },
    "string": ["input", "output"],
    "boolean": ["clean", "drafts", "serve", "watch", "noDescription", "really-none"],
    "alias": {
        "clean": "c",
        "drafts": "d",
        "input": "i",
        "output": "o",
        "serve": "s",
        "watch": "w",
        "noDescription": "x",
    },
    "argument": {
        "output": "dir",
        "par": "param",
    },
    "default": {
        "input": "content",
        "output": "out",
        "clean": True,
    },
}


if __name__ == '__main__':
    pprint(process_flags(sys.argv[1:], options))
