"""
Shared metadata entries for loader, store and endpoint tests.

Entries use the JSON field names of the configuration file.
"""

FOO_ENTRY = {"pkg": "example.com/foo", "vcs": "git", "repo": "https://github.com/x/foo"}

DOC_ENTRY = {
    "pkg": "example.com/documented",
    "vcs": "git",
    "repo": "https://github.com/x/documented",
    "doc": "https://pkg.go.dev/example.com/documented",
    "body": "<p>never shown</p>",
}

SOURCE_ENTRY = {
    "pkg": "example.com/src",
    "vcs": "git",
    "repo": "https://github.com/x/src",
    "source": "https://github.com/x/src",
    "sourcedir": "https://github.com/x/src/tree/master{/dir}",
    "sourceline": "https://github.com/x/src/blob/master{/dir}/{file}#L{line}",
}

BODY_ENTRY = {
    "pkg": "example.com/body",
    "vcs": "hg",
    "repo": "https://hg.example.org/body",
    "body": "<a href=\"https://hg.example.org/body\">sources</a>",
}

# Both patterns match "example.com/tools/..." paths; file order decides.
TOOLS_PATTERN_ENTRY = {
    "pkg": "example.com/tools",
    "pattern": "^example\\.com/tools(/|$)",
    "vcs": "git",
    "repo": "https://github.com/x/tools",
}
CATCH_ALL_PATTERN_ENTRY = {
    "pkg": "example.com/all",
    "pattern": "^example\\.com/",
    "vcs": "git",
    "repo": "https://github.com/x/all",
}

SAMPLE_ENTRIES = [
    FOO_ENTRY,
    DOC_ENTRY,
    SOURCE_ENTRY,
    BODY_ENTRY,
    TOOLS_PATTERN_ENTRY,
]
