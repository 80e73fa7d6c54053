"""Build BEMJSON for `# Hello **World**` the way a parser would, zero config, zero deps."""

from bemjson_md import default_rules, to_json

rules = default_rules()
heading = rules["heading"](["Hello ", rules["strong"]("World")], 1)
print(to_json(heading, indent=2))
