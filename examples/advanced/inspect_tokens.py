"""Look at the token stream behind a render, as JSON."""

from tinymark import tokenize
from tinymark.serialization import to_json

tokens = tokenize("# Title\nSome **bold** text with a [link](https://example.com).\n- item")
print(to_json(tokens, indent=2))
