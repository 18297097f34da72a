# cocompute

Server-rendered HTML pages for a cooperative LLM inference orchestrator.
It also has a small time-to-live cache for the "total time computed" figure
shown on the landing page.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `cocompute.total_compute`

- `TotalComputeCache(ttl=600.0)` caches the sum of `compute_ms` over the
  `metering_logs` table. `ttl` is a number of seconds or a
  `datetime.timedelta`. The cache is guarded by a lock, so threads can share
  one instance.
- `TotalComputeCache.get(db)` takes a DB-API connection, such as one from
  `sqlite3`. It returns the cached total while it is younger than `ttl`.
  Otherwise it runs the query again. If the query raises `sqlite3.Error`,
  the failure is logged as a warning and `get` returns the last good value,
  or `0` when nothing has been fetched yet.
- `humanize_ms(ms)` renders milliseconds in the largest unit that holds at
  least one whole unit:
  - `humanize_ms(45_000)` gives `"45 seconds"`
  - `humanize_ms(150_000)` gives `"2.5 minutes"`
  - `humanize_ms(9_000_000)` gives `"2.5 hours"`
  - `humanize_ms(129_600_000)` gives `"1.5 days"`

  Zero and negative values give `"0 seconds"`.

### `cocompute.markup`

Shared page pieces, each returned as a string of HTML:

- `render_page(title, body)` wraps body markup in a full document.
- `text_input(label, input_type, name, placeholder, required, hint)` builds a
  labelled input field.
- `icon(name, css_class)` builds an icon placeholder element.
- `error_banner(message)` builds the red error box.

### `cocompute.account`

- `beta_page(error=None, success=False, turnstile_site_key=None)` renders the
  sign-up form. When `success` is true, it renders the "check your email"
  page instead. A captcha widget is included only when a site key is given.
- `forgot_page(sent=False)` renders the forgot-password form. When `sent` is
  true, the form shows a confirmation notice.
- `login_page(error=None)` renders the sign-in form.
- `reset_page(token, sent_at, error=None, now=None)` renders the
  new-password form. If `sent_at` is `None` or more than one hour ago, it
  renders the "link expired" page instead.
- `verify_page(token, sent_at, error=None, now=None)` renders the
  set-password form in the same way, with a 48-hour window.
- `is_link_expired(sent_at, lifetime, now=None)` makes the expiry decision.
  It also accepts naive datetimes.
- `RESET_LINK_LIFETIME` and `VERIFY_LINK_LIFETIME` hold the two windows.

### `cocompute.landing`

- `landing_page(logged_in, total_compute, script_url)` renders the landing
  page.
  - `total_compute` is the text shown in the "Total time computed" badge.
  - `script_url` is the address of the network animation script.
- `landing(logged_in, cache, db, script_url)` fills in that badge from a
  `TotalComputeCache` and `humanize_ms`.

### `cocompute.quickstart`

- `quickstart_page(base_url)` renders the two-path quickstart guide.
- The shell commands it shows come from these functions:
  - `host_install_command(base_url)`
  - `consumer_curl_command(base_url)`
  - `list_models_command(base_url)`

## Example

```python
import sqlite3

from cocompute.landing import landing
from cocompute.total_compute import TotalComputeCache

db = sqlite3.connect(":memory:")
db.execute("CREATE TABLE metering_logs (compute_ms INTEGER NOT NULL)")
db.execute("INSERT INTO metering_logs VALUES (9000000)")

cache = TotalComputeCache(ttl=600)
html = landing(False, cache, db, "/static/network.js")
assert "2.5 hours" in html
```

## What this package does not do

Every page function returns a complete HTML document as a string. The package
does not include any of the following:

- **No web server or routing.** Nothing reads query strings, handles form
  posts or sets cookies. Mount the functions in the web framework of your
  choice and pass in the values they take.
- **No database schema or migrations.** The cache expects a `metering_logs`
  table that already exists.
- **No user lookup.** The reset and verification pages take the link's send
  time as `sent_at`. Looking up the user who holds a token is left to the
  caller.
- **No accounts, e-mail, captcha checks or inference API.** The pages only
  describe these features; the package does not implement them.
- **No styling or assets.** The stylesheet and the network animation script
  are not part of the package.