# gostudy

A collection of well-known algorithms, design patterns and small service
building blocks, each in its own module, using only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `gostudy.binary_tree` | `TreeNode` and `zigzag_level_order` |
| `gostudy.heap` | A 1-indexed min-heap: `Heap` (`insert`, `delete`, `top_n`, `values`), `heapify`, `build_heap`, `build_heap_array`, `find_kth_largest` |
| `gostudy.linked_list` | `Node`, `new_linked_list` and `find_cross_node`, which finds where two lists join |
| `gostudy.sorting` | In-place `bubble_sort`, `select_sort`, `insert_sort`, `quick_sort`, `merge_sort_loop`, `merge_sort_recursive`; `partition`, `partition2`, `merge`; `search` (rotated sorted list), `search_range`, `binary_search`, `longest_consecutive`, `nth_ugly_number`, `decode_string`, `rotate` |
| `gostudy.builder` | Builder pattern: `HuaWeiBuilder` and `XiaomiBuilder` assemble a `Phone`, driven by a `Manager` |
| `gostudy.factory_simple` | Simple factory: `new_rule_config_parser("json" or "yaml")` |
| `gostudy.factory_method` | Factory method: parser factories (`new_rule_config_parser_factory`) and phone factories (`new_phone_factory` for `"HuaWei"`, `"Xiaomi"`, `"Iphone"`) |
| `gostudy.abstract_factory` | Abstract factory: `JsonConfigParserFactory`/`XmlConfigParserFactory`, and phone-plus-charger families via `new_phone_and_charger_factory` |
| `gostudy.singleton` | `get_eager_singleton` (created at import) and `get_lazy_singleton` (created once, thread-safe) |
| `gostudy.route_errors` | `validate_coordinates` and three reporting styles (`get_route_logged`, `get_route_plain`, `get_route`); a wrapped error chain (`func1`, `func2`, `func3`, `ChainError`, `root_cause`) |
| `gostudy.series` | `fibonacci_series`, `square`, `square_plus_one` |
| `gostudy.pipe_filter` | `SplitFilter`, `ToIntFilter`, `SumFilter` chained by `StraightPipeline` |
| `gostudy.employee_json` | `Employee` with nested `BasicInfo` and `JobInfo`, `from_json` and `to_json` |
| `gostudy.employee_service` | A WSGI `application` with greetings, the time and `query_employee` |
| `gostudy.framing` | Length-prefixed framing: `encode` and `FrameDecoder` |
| `gostudy.word_file` | `random_line`, `generate_file` and `split_file` |

Unknown kinds passed to the factory functions raise `ValueError`.
Importing `gostudy.singleton` prints a line when the eager instance is
created; the lazy instance prints one on first use.

## Examples

Sorting happens in place:

```python
from gostudy.sorting import bubble_sort, decode_string

nums = [5, 7, 7, 8, 8, 10, 1]
bubble_sort(nums)
print(nums)                          # [1, 5, 7, 7, 8, 8, 10]

print(decode_string("3[a]2[bc]"))    # aaabcbc
```

A pipeline of filters, each handing its result to the next:

```python
from gostudy.pipe_filter import SplitFilter, StraightPipeline, SumFilter, ToIntFilter

pipeline = StraightPipeline("p1", SplitFilter(","), ToIntFilter(), SumFilter())
print(pipeline.process("1,2,3"))     # 6
```

A filter given data of the wrong type raises `FilterFormatError`; a part
that is not a decimal integer makes `ToIntFilter` raise `ValueError`.

Employee records read from and written to JSON:

```python
from gostudy.employee_json import Employee

text = '{"basic_info": {"name": "Mike", "age": 30}, "job_info": {"skills": ["java", "Go", "C"]}}'
employee = Employee.from_json(text)
print(employee.basic_info.age)       # 30
print(employee.to_json())
```

Framing messages with a two-byte little-endian length header:

```python
from gostudy.framing import FrameDecoder, encode

frame = encode("hello")
decoder = FrameDecoder()
print(decoder.feed(frame[:3]))       # []
print(decoder.feed(frame[3:]))       # ['hello']
```

## Commands

```
gostudy-route-errors
gostudy-employee-service [--host HOST] [--port PORT]
gostudy-word-file generate [--dir DIR] [--lines N] [--seed SEED]
gostudy-word-file split [--dir DIR] [--limit N]
```

`gostudy-route-errors` runs the `func3 → func2 → func1` chain, logs the
root cause and the wrapped error with its trace, and exits with status 1.

`gostudy-employee-service` serves the WSGI application (port 8080 by
default). It answers `GET /` with `Welcome!`, `GET /time/` with the
current time as JSON, `GET /hello/<name>` with a greeting and
`GET /employees/<name>` with that employee's JSON record, or a
"Not Found" message for an unknown name.

`gostudy-word-file generate` writes `big_input_file.txt` of random words
into the directory (`file-store` by default, 200000 lines).
`gostudy-word-file split` copies that file into `input_piece_1`,
`input_piece_2`, ... of at most 1000 lines each and prints their paths.

## What it does not do

`gostudy.framing` only encodes and decodes frames; the package opens no
sockets and has no TCP client or server. `split_file` only cuts the input
into pieces; nothing in the package processes the pieces further. The
config parsers produced by the factories are markers of their format and
parse nothing.