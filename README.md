# kittysearch

An incremental search overlay for the scrollback of the Kitty terminal.
Type a query, see how many matches there are, step through them with the
arrow keys and press Enter to scroll the Kitty window to the selected line.
While there are matches, they are highlighted in the window with a Kitty
text marker.

## Requirements

- Python 3.10 or later
- The Kitty terminal with remote control enabled (`allow_remote_control yes`
  in `kitty.conf`). The program must run inside a Kitty window (it checks for
  `KITTY_WINDOW_ID`); it reads the screen text with `kitty @ get-text`,
  highlights with `kitty @ create-marker` and scrolls with
  `kitty @ scroll-to-line`.

## Installation

```
pip install .
```

## Usage

```
kittysearch [--query TEXT] [--buffer-size N] [--case-sensitive] [--regex] [--debug]
```

| Option | Meaning |
| --- | --- |
| `-q`, `--query` | Initial search query; it is searched for as soon as the panel opens |
| `--buffer-size` | Stored on the search engine as its maximum buffer size (default 1000000); it does not currently limit the search |
| `--case-sensitive` | Match case exactly (searches ignore case by default) |
| `--regex` | Treat the query as a regular expression instead of literal text |
| `--debug` | Log at debug level instead of info |
| `--version` | Print the version and exit |

If the program is not running inside Kitty, or a Kitty command fails, it
prints `Error: ...` to standard error and exits with status 1.

A handy Kitty mapping in `kitty.conf`:

```
map ctrl+shift+f launch --type=overlay kittysearch
```

The panel is drawn in the bottom-right corner of the terminal: the query on
the first line and `current/total` on the third.

### Keys

| Key | Action |
| --- | --- |
| any printable character | insert into the query; results update immediately |
| Backspace / Delete | remove a character before / under the cursor |
| Left / Right / Home / End | move the cursor in the query |
| Up / Down | previous / next match |
| Enter | jump to the selected match (if any) and quit |
| Esc | clear the query; on an empty query, quit |

The marker is removed when the program ends.

## Library use

The search engine works on its own:

```python
from kittysearch.search.engine import SearchEngine

engine = SearchEngine(max_buffer_size=10_000, case_sensitive=False, regex_enabled=True)
for result in engine.search_text(log_text, r"ERROR|WARN"):
    print(result.line_number, result.match_start, result.match_end, result.line)
```

Each match in a line gives its own `SearchResult`, with a 1-based line number,
the line (including its trailing newline) and the match's offsets in the line.
An empty pattern gives no results, and text containing a NUL character is
treated as binary and gives none either. An invalid regular expression raises
`SearchError`. Results are cached (up to 100 entries, least recently used
dropped first) per pattern, options and text length; `cache_size()` reports
the number of entries and `clear_cache()` empties the cache.
`search_buffer()` takes bytes and decodes them as UTF-8 with replacement.

Other building blocks:

- `kittysearch.search.pattern.PatternMatcher` compiles a query (`compile_pattern`),
  tests it (`is_match`) and lists match spans (`find_matches`).
- `kittysearch.search.buffer.BufferManager` loads files or strings as bytes,
  keeping only the last `max_size` bytes, and splits buffers into chunks.
- `kittysearch.kitty.buffer.TerminalBuffer` is a bounded line history with
  `text()`, `line()`, `context_around()` and case-optional substring `search()`.
- `kittysearch.kitty.commands.KittyCommand` builds `kitty @` command lines;
  `WindowInfo`, `TabInfo` and `OSWindowInfo` parse the output of `kitty @ ls`
  with `from_dict`.
- `kittysearch.kitty.client.KittyClient` runs remote-control commands
  asynchronously (`KittyClient.create()` for the current window); failures
  raise `KittyError`. `get_window_info()` returns the parsed JSON of `kitty @ ls`.
- `kittysearch.ui.input.InputHandler` edits a query from `KeyEvent`s and
  returns an `InputAction`.
- `kittysearch.ui.renderer.UIRenderer` formats a result as a line-numbered,
  width-limited string.

## Running the tests

```
pip install .[test]
pytest
```