import pytest

UNALIGNED = (
    "/**\n"
    " * @param {string} a desc1\n"
    " * @param {number} longname desc2\n"
    " */"
)

ALIGNED = (
    "/**\n"
    " * @param {string} a" + " " * 8 + "desc1\n"
    " * @param {number} longname desc2\n"
    " */"
)

WITH_RETURNS = (
    "/**\n"
    " * @param {string} name the name\n"
    " * @returns {boolean} whether ok\n"
    " */"
)

DOCUMENTED = (
    "/**\n"
    " * Sums numbers.\n"
    " *\n"
    " * @param {number} a first\n"
    " *   operand\n"
    " * @param {number} bb second\n"
    " * @returns {number} the sum\n"
    " */"
)

WITH_EXAMPLE = (
    "/**\n"
    " * @param {string} a desc1\n"
    " * @example {VeryLongTypeName} thing\n"
    " * @param {number} longname desc2\n"
    " */"
)

INDENTED = (
    "    /**\n"
    "     * @param {string} a desc1\n"
    "     * @param {number} longname desc2\n"
    "     */"
)

UNTYPED = (
    "/**\n"
    " * @param foo desc\n"
    " * @param   longer words here\n"
    " */"
)

MULTILINE_TYPE = (
    "/**\n"
    " * @param {{\n"
    " *   a: string\n"
    " * }} opt desc\n"
    " * @param {x} b desc\n"
    " */"
)

TABBED = (
    "\t/**\n"
    "\t * @param {string} a desc\n"
    "\t * @param {number} b desc\n"
    "\t */"
)

SAMPLE_COMMENTS = [
    UNALIGNED,
    ALIGNED,
    WITH_RETURNS,
    DOCUMENTED,
    WITH_EXAMPLE,
    INDENTED,
    UNTYPED,
    MULTILINE_TYPE,
    TABBED,
]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/global config and DOCALIGN_* env vars out of every test."""
    import os

    from docalign.config import hierarchy

    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "no-global" / "config.yaml")
    for key in list(os.environ):
        if key.startswith("DOCALIGN_"):
            monkeypatch.delenv(key)
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)


@pytest.fixture
def sample_js(tmp_path):
    """Write a small JavaScript file with misaligned JSDoc and return its path."""
    content = (
        "/**\n"
        " * Adds.\n"
        " * @param {number} a first\n"
        " * @param {number} bee second\n"
        " */\n"
        "function add(a, bee) {\n"
        '  return a + bee; // "/** not a comment */"\n'
        "}\n"
        "\n"
        'const s = "/** @param  {x}  y */";\n'
        "\n"
        "class K {\n"
        "  /**\n"
        "   * @param {string} name the name\n"
        "   * @returns {boolean} ok\n"
        "   */\n"
        "  has(name) {}\n"
        "}\n"
    )
    path = tmp_path / "sample.js"
    path.write_text(content)
    return path
