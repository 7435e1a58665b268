#!/usr/bin/env python3
"""
Example usage of the JSON Formatter.

This script demonstrates validating, formatting, minifying and
sorting a JSON document, then printing its tree view and history.
"""

import asyncio
import json
from json_formatter import JSONFormatter, Operation
from json_formatter.config import Settings


async def main():
    """Main example function."""
    print("JSON Formatter Example")
    print("=" * 50)

    # Create sample data
    sample_data = {
        "name": "John Doe",
        "age": 30,
        "email": "john@example.com",
        "address": {
            "street": "123 Main St",
            "city": "Anytown",
            "zipCode": "12345"
        },
        "hobbies": ["reading", "swimming", "coding"],
        "isActive": True,
        "balance": 1234.56
    }
    json_string = json.dumps(sample_data, separators=(',', ':'))

    formatter = JSONFormatter(settings=Settings(history_path=None))

    validation = await formatter.validate_json(json_string)
    print(f"✅ Valid: {validation.is_valid}")

    for operation in (Operation.FORMAT, Operation.SORT_KEYS, Operation.MINIFY):
        result = await formatter.process_json(json_string, operation, indent_size=2)
        change = formatter.size_calculator.format_size_change(result.original_size,
                                                              result.processed_size)
        print(f"\n🔧 {operation.value} ({result.original_size} -> {result.processed_size} chars, {change}):")
        print(result.result_text)

    broken = '{\n  "name": "John",\n  "age": ,\n}'
    validation = await formatter.validate_json(broken)
    print(f"\n❌ Invalid at line {validation.line_number}, column {validation.column_number}: "
          f"{validation.error_message}")

    tree = await formatter.render_tree(json_string)
    print("\n🌳 Tree view:")
    for line in tree["lines"]:
        print(line)

    print("\n📜 History:")
    for record in await formatter.get_history():
        print(f"   • #{record.id} {record.operation}: success={record.success}")


if __name__ == "__main__":
    asyncio.run(main())
