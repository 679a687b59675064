"""Sample document shown when the editor first opens."""

DEFAULT_DOCUMENT = """### 🎭 **Prose**
###### **Turning your markdown into lovely HTML!**
Prose lets you draft a document and watch it render in real time.
If you want to use the HTML elsewhere, switch the view to raw, unrendered HTML and copy it anywhere you'd like.
When it is time to save your work, download your document as an `.md` file.

##### Built on the following tech:
- 🐍[Python](https://www.python.org/) for the parser and renderer
- 🧱[Pydantic](https://docs.pydantic.dev/) to model the document tree

#### Support
###### Prose supports the following markdown structures:
1. Headers 1-6
1. Ordered Lists
1. Unordered Lists
  - including *nested* lists
1. Codeblocks (no syntax highlighting)
1. **boldtext**
1. *italic text*
1. `inline_code`
1. Links
1. Images

```python
from prose import parse_and_render

html = parse_and_render("# Hello")
```

You may be asking: *What makes this different from any other markdown parser?*
It is small, it never fails on malformed markup, and it is fast enough to run on every keystroke.
"""
