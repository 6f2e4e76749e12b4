# bgce

A collection of small command-line tools and tiny WSGI services.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Command-line tools

### Word count (`bgce-wc`, `bgce.wordcount`)

Counts lines, words, bytes or characters of a file or of standard input.

    bgce-wc notes.txt          # lines, words and bytes
    bgce-wc -l notes.txt       # lines only
    bgce-wc -w notes.txt       # words only
    bgce-wc -c notes.txt       # bytes only
    bgce-wc -m notes.txt       # characters only, line endings not counted
    bgce-wc -l < notes.txt     # read standard input

Each count is printed right-aligned in eight columns, followed by the file
name when one was given. Run without arguments to see the usage text. A
line of 64 KiB or more is reported as `Error: token too long`.

The counters are also available as functions taking `bytes` or `str`:
`count_bytes`, `count_lines`, `count_words` and `count_chars`.

### To-do list (`bgce-todo`, `bgce.todo`)

Keeps tasks in `tasks.json` in the current directory.

    bgce-todo add "Buy milk"
    bgce-todo list             # open tasks
    bgce-todo list --all       # every task
    bgce-todo complete 1
    bgce-todo delete 1

From Python, `TaskStore(path)` offers `load`, `save`, `add(description)`,
`list(include_done)`, `complete(task_id)` and `delete(task_id)`; each entry
is a `Task` with `id`, `description`, `created_at` and `done`. A new task's
id is one more than the number of tasks in the file.

### Brace check (`bgce-jsoncheck`, `bgce.jsoncheck`)

A deliberately minimal checker, not a JSON parser: a file is reported as
valid only when its braces are exactly one `{` followed by one `}`; every
other character is ignored.

    bgce-jsoncheck data.json

It prints `Valid JSON` (exit status 0) or `Invalid JSON` (exit status 1).
`tokenize(text)` and `parse(tokens)` expose the two steps.

### Unit converter (`bgce-units`, `bgce.units`)

An interactive menu converting meters and feet, Celsius and Fahrenheit,
kilograms and pounds. Choose `0` to leave.

    bgce-units

`format_conversion(option, value)` gives the same result line for a menu
entry from 1 to 6, for example `format_conversion(1, 1.0)` returns
`"1.00 meters = 3.28 feet"`; any other option raises `ValueError`.

### GitHub activity (`bgce-activity`, `bgce.activity`)

Shows the recent public activity of a GitHub user: pushes, issues, stars
and forks. Other event types are skipped.

    bgce-activity octocat

Problems are printed as `Error: ...`. `fetch_activity(username)` and
`describe_events(events)` raise `ActivityError`.

## Web services

### URL shortener (`bgce-shortener`, `bgce.shortener`)

Stores short keys in a MySQL table `urls(short_key, original_url)`, which
must already exist. The connection settings are read from a `.env` file in
the current directory; the service refuses to start without one:

    DB_USER=user
    DB_PASS=password
    DB_HOST=localhost
    DB_PORT=3306
    DB_NAME=shortener

Start it with:

    bgce-shortener

It listens on port 8081. `POST /shorten` with a JSON body such as
`{"url": "http://example.com/some/long/path"}` answers with
`{"key": ..., "url": ..., "shortUrl": "http://localhost:8081/<key>"}`, the
key being six random letters and digits; `GET /<key>` answers with a 302
redirect to the stored URL, or 404 if the key is unknown.

`ShortenerApp(store)` is the WSGI application; any object with
`save_url(short_key, original_url)` and `get_url(short_key)` can serve as
the store. `MySQLUrlStore` wraps a database connection and
`connect_from_env(env_file)` builds one from the settings above.

### Sample services (`bgce.services`)

    bgce-categories      # /categories on port 8080 (GET, POST, PUT, DELETE)
    bgce-classnotes      # /classnotes (GET, POST) and /classnotes/<id> on port 8081
    bgce-test-server     # /, /categories, /categories/classnotes[/<id>] on port 8080

Each one is a plain WSGI application (`categories_app`, `classnotes_app`,
`test_server_app`) and can be run with `serve(app, port)` or mounted in any
WSGI server. The test server accepts a JSON object on
`POST /categories/classnotes` and echoes it back; any path it does not know
gets the welcome text.

## What this package does not do

- The sample services answer with fixed messages only: categories and class
  notes are neither stored nor read from anywhere.
- There is no authentication: `is_super_admin` treats every request as
  coming from a super admin.
- The URL shortener does not create its database table.