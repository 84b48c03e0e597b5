"""
wrenchit demonstration script.
"""

import wrenchit


def main():
    print("wrenchit - Dashboard Export JSON Repair Demo")
    print("=" * 44)

    examples = [
        # Already valid
        ('{"status": "ok"}', "Valid JSON"),
        # Escaped document without outer quotes
        ('{\\"title\\":\\"Orders\\"}', "Escaped quotes"),
        # Slash delimiters around every string
        ('{///"status///":///"ok///",}', "Slash delimiters and trailing comma"),
        # Backslash-slash delimiters
        ('{\\/"title\\/":\\/"Orders\\/"}', "Backslash-slash delimiters"),
        # Nested JSON stored as a raw string value
        ('{"Content":"{"key":"val","rows":"[1,2]"}"}', "Nested JSON as string"),
        # Quoted document with nested JSON inside
        ('"{"a":"{"b":[1,2,]}"}"', "Quoted document"),
        # Truncated export
        ('{///"status///":///"ok///"', "Truncated export"),
    ]

    for i, (raw, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:    {raw}")

        result = wrenchit.repair_json(raw)
        if result.success:
            print(f"Strategy: {result.strategy}")
            print(f"Output:   {result.value}")
        else:
            print(f"Error:    {result.error}")
            print(f"Best:     {result.best_attempt}")


if __name__ == "__main__":
    main()
