"""
relaxjson demonstration script.
"""

import relaxjson
from relaxjson import DuplicateKeyPolicy, ParseConfig, ParseError


def main():
    print("relaxjson - Relaxed JSON Parser Demo")
    print("=" * 40)

    examples = [
        ("{'name': 'John', 'age': 30}", "Single quotes"),
        ('{"quote": \'He said "hi"\'}', "Mixed quote styles"),
        (
            """
        {
            "server": {
                "host": 'localhost',
                "port": 8080,
                "ssl": false
            },
            "features": ['auth', 'logging'],
            "message": "Server says \\"Hello world!\\""
        }
        """,
            "Nested configuration",
        ),
        ('{"test": "value1", "test": "value2"}', "Duplicate keys (last wins)"),
        ('{"items": [1, 2, 3,]}', "Trailing comma (rejected)"),
        ("{name: 'John'}", "Unquoted key (rejected)"),
        ('{"big": 1e10}', "Exponent (rejected)"),
    ]

    for i, (json_str, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {json_str.strip()}")

        try:
            result = relaxjson.parse(json_str)
            print(f"Output: {result.to_python()}")
        except ParseError as e:
            print(f"Error:  {e}")

    print(f"\n{len(examples) + 1}. Duplicate keys (rejected by configuration)")
    duplicate_example = '{"test": "value1", "test": "value2"}'
    print(f"Input:  {duplicate_example}")
    try:
        config = ParseConfig(duplicate_keys=DuplicateKeyPolicy.REJECT)
        result = relaxjson.parse(duplicate_example, config)
        print(f"Output: {result.to_python()}")
    except ParseError as e:
        print(f"Error:  {e}")


if __name__ == "__main__":
    main()
