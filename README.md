# termreq

termreq is a full-screen terminal client for HTTP requests, driven by
Vim-style keys. You keep several requests open as tabs. You edit their URL,
name, body and headers, send them, and read the response, all without leaving
the keyboard.

## Installing

```
pip install termreq
```

## Running

```
termreq [--data-dir DIR] [--help-file FILE]
```

- `--data-dir DIR`: the folder for saved requests. Requests go in
  `DIR/requests`, and a `DIR/data` folder is created too. By default this is
  the user data directory for `TReq`, for example `~/.local/share/TReq` on
  Linux.
- `--help-file FILE`: the JSON document that `?` shows. By default this is
  `help.json` in the data directory.

The `EDITOR` environment variable must be set. If it is not, termreq prints an
error and exits with status 1. The terminal interface needs a POSIX terminal.

When it starts, termreq loads every file in the `requests` folder that holds a
valid request. Other files are skipped. If there are none, it creates and saves
one request called "New Request". Each saved request is a JSON object with
`name`, `url`, `method`, `headers` and `body`.

## Keys

| Key                | Action                                                  |
|--------------------|---------------------------------------------------------|
| `?`                | open the help screen                                    |
| `Enter`            | submit the current request                              |
| `q`                | quit                                                    |
| `e`                | edit the focused section                                |
| `d`                | delete the current tab (in the tab list)                |
| `Tab`              | switch: body/headers, next method, next tab             |
| `h j k l`, arrows  | move between sections                                   |
| `n`                | new tab (in the tab list or the URL section)            |
| `s`                | save the current request                                |
| `r`                | reload the body from the request's edition file         |
| `G`                | go to the logs                                          |
| `gg`               | go to the tab list                                      |
| `gt` / `gT`        | next / previous tab                                     |
| `gl` / `gh`        | widen the right / left panel                            |

What `e` does depends on where the focus is:

- tab list: rename the tab
- URL: edit the URL
- request body: edit the body
- request headers: edit the headers
- response body: show the response body (your changes are thrown away)

In the URL section, `Tab` cycles the method through GET, POST, PUT, PATCH,
DELETE and HEAD.

Text is edited in a popup. `Enter` accepts the text, `Esc` restores the text
you started with, and `Backspace` deletes the last character. Headers are
edited as a JSON object of strings. If the JSON is invalid, the log shows
"ERROR HEADERS" and the previous headers are kept.

When you start editing a body, headers or a response, the text is also written
to a temporary edition file for the current request. `r` reads the body back
from that file. These files are deleted when termreq exits.

On the help screen, `j`/`k` or the arrow keys scroll, and any other key closes
it. The help document is JSON of this form:

```json
{"content": [[["Some text", "ColorRed"], [" more text", null]], [["Next line", null]]]}
```

The styles are `ColorCyan`, `ColorRed`, `ColorBlue` and `ColorYellow`.

A URL that does not start with `http://` or `https://` is sent with `http://`
put in front. A response body that is valid JSON is shown pretty-printed, with
sorted keys and two-space indentation. If sending fails, the status shows
"Error" and the body shows the error message.

## What it does not do

- It does not start the program named by `EDITOR`. The variable must be set,
  but all editing happens in the built-in input popup.
- No help document comes with the package. Until you provide one at the help
  file path, `?` only logs a "COMMAND ERROR".
- GET requests are sent without the request's headers. The other methods send
  both headers and body.
- Response times are not measured or shown.

## Using the pieces from Python

The building blocks work on their own:

```python
import asyncio
from termreq.web import Request, Method
from termreq.client import WebClient, HttpxRepository

request = Request(url="example.com", method=Method.GET)
response = asyncio.run(WebClient(HttpxRepository()).submit(request))
print(response.status, response.body)
```

`WebClient.submit` raises `termreq.client.RequestError` when the request cannot
be sent.

Other useful pieces:

- `termreq.save_files.SaveFiles` reads and writes saved requests in a folder.
- `termreq.keymaps.KeyboardListener` resolves keys, including the `g`
  prefix, into `termreq.actions.Actions`.
- `termreq.validators` holds `url_protocol`, `pretty_json_body`,
  `run_validators` and `run_validators_ignoring_errors`.