# leptographic

Accessible UI components that render to HTML and are styled with Tailwind CSS
classes. Each component keeps its state in a small hook object. A component
can be controlled from outside or keep its own state, and you drive it from
Python code or from tests.

## Rendering

`leptographic.dom` holds a small element tree:

- `element(tag, attrs, *children)` builds an `Element`. It flattens nested
  child lists and drops `None`. A void element such as `input` raises
  `ValueError` if it is given children.
- `render(node)` and `Element.render()` produce HTML. Text is escaped. An
  attribute whose value is `None` or `False` is left out, and one whose value
  is `True` is written bare. Numbers print as plain decimals, so `100.0`
  becomes `100`.
- `class_names(*parts)` joins the non-empty class strings.

## Components

All components live in `leptographic.components`.

- `checkbox.Checkbox` / `checkbox.CheckboxIndicator`: a three-state checkbox.
  `CheckedState` is `FALSE`, `TRUE` or `INDETERMINATE`. The checkbox renders a
  hidden form input and a `role="checkbox"` button that carries
  `aria-checked` (`"mixed"` when indeterminate) and `data-state`.
  `click()` and `keydown(KeyEvent(" "))` or `keydown(KeyEvent("Enter"))`
  toggle it unless it is disabled; toggling from indeterminate gives checked.
  The indicator renders only while the box is checked or indeterminate, or
  when `force_mount=True`.
- `switch.Switch` / `switch.SwitchThumb`: an on/off toggle with `role="switch"`.
- `progress.Progress` / `progress.ProgressIndicator`: a `role="progressbar"`
  element. A max that is missing, NaN or not positive falls back to 100. A
  value outside `0..max` makes the bar indeterminate. Otherwise the state is
  `loading` or `complete`.
- `separator.Separator`: a horizontal (the default) or vertical divider. A
  decorative separator has no `role` and no `aria-orientation`.

## Hooks

The modules in `leptographic.hooks` provide:

- `controllable_state.ControllableState`: a value that is either controlled
  or held internally. `set_value()` always calls the change callback.
- `checkbox_state.CheckboxState` and `switch_state.SwitchState`: the checked
  state, with its ARIA, `data-state` and form values and a `toggle()`.
- `id_generator`: `use_id`, `use_id_with_prefix`, `use_related_ids`,
  `use_form_ids` and `use_custom_id_pattern` hand out ids from a shared,
  thread-safe `IdGenerator`. `use_stable_id(key)` derives an id from the key
  alone.
- `previous`: `Previous`, `PreviousWith` and `PreviousDetailed` track the
  previous value across calls to `update()`.
- `escape_key`: `KeyEventBus` with `use_escape_key`, `use_escape_key_when`,
  `use_escape_key_with_config` (using `EscapeKeyConfig`) and
  `use_key_combinations`. Each of these returns a function that detaches the
  listener it added.

## Example

```python
from leptographic.components.checkbox import Checkbox
from leptographic.dom import render

box = Checkbox(id="accept")
box.click()
print(render(box.render()))  # the button carries aria-checked="true"
```

## Showcase and demo server

`leptographic.app.App` renders a showcase page with all four components and a
light/dark theme. Its state changes through methods: `toggle_theme()`, and
`advance_progress()`, which adds 25 each step and wraps to 0 after 100.
`render_document(app)` returns a full HTML document.

`leptographic.server` serves that document over HTTP:

```
pip install .
leptographic --help
leptographic --host 127.0.0.1 --port 3000
```

The default address is `127.0.0.1:3000`. You can set another one with the
`LEPTOS_SITE_ADDR` environment variable, in the form `host:port`. `/` answers
200. Any other path answers 404 with the same page. `HEAD` is supported.

### What it does not do

The served page is static HTML with no scripts in the browser. Clicking the
checkbox, the switch or the theme button there changes nothing, and the
progress bar does not advance by itself. Those changes happen only through the
Python methods above. The server does not serve a stylesheet or other asset
files, and the "Code" links on the cards lead to the 404 page.

## Tests

```
pip install .[test]
pytest
```