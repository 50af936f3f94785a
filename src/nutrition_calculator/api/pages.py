"""Minimal HTML pages that consume the calculator API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def home_page() -> HTMLResponse:
    """Landing page."""
    return HTMLResponse(_page("Home", _HOME_BODY))


@router.get("/calculator", response_class=HTMLResponse)
async def calculator_page() -> HTMLResponse:
    """Calculator form driven by the session endpoints."""
    return HTMLResponse(_page("Calculator", _CALCULATOR_BODY))


def _page(title: str, body: str) -> str:
    return _LAYOUT.replace("{{title}}", title).replace("{{body}}", body)


_LAYOUT = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Nutrition Calculator - {{title}}</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 0; }
      nav { background: #1f2937; padding: 0.8rem 2rem; }
      nav a { color: #fff; margin-right: 1.2rem; text-decoration: none; }
      main { margin: 2rem; }
      .entry { border: 1px solid #ddd; border-radius: 6px; padding: 1rem;
               margin-bottom: 1rem; }
      .entry input[type=number] { width: 6rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      table { border-collapse: collapse; }
      td { padding: 0.2rem 0.8rem 0.2rem 0; }
    </style>
  </head>
  <body>
    <nav><a href="/">Home</a><a href="/calculator">Calculator</a></nav>
    <main>{{body}}</main>
  </body>
</html>
"""

_HOME_BODY = """
<h1>Home</h1>
<p>Build a list of foods and quantities to see their combined nutrition.</p>
<p><a href="/calculator">Open the calculator</a></p>
"""

_CALCULATOR_BODY = """
<h1>Calculator</h1>
<datalist id="foods"></datalist>
<div id="entries"></div>
<button onclick="addEntry()">Add food</button>
<h2>Totals</h2>
<table id="totals"></table>
<script>
  const LABELS = [
    ['protein', 'Proteins', 'g'], ['carbohydrates', 'Carbohydrates', 'g'],
    ['fat', 'Fats', 'g'], ['saturated_fat', 'Saturated Fat', 'g'],
    ['calories', 'Calories', 'kcal'], ['fiber', 'Fiber', 'g'],
    ['sugar', 'Sugar', 'g'], ['salt', 'Salt', 'g'],
  ];
  let sessionId = null;

  async function call(method, path, body) {
    const res = await fetch(path, {
      method,
      headers: { 'Content-Type': 'application/json' },
      body: body === undefined ? undefined : JSON.stringify(body),
    });
    if (!res.ok) {
      alert('Error: ' + res.status);
      return null;
    }
    return res.json();
  }

  function nutrientRows(values) {
    return LABELS.map(([key, label, unit]) =>
      `<tr><td>${label}</td><td>${values[key].toFixed(2)} ${unit}</td></tr>`
    ).join('');
  }

  function el(tag, props = {}, children = []) {
    const node = Object.assign(document.createElement(tag), props);
    node.append(...children);
    return node;
  }

  function nutrientTable(values) {
    return el('table', {}, LABELS.map(([key, label, unit]) =>
      el('tr', {}, [
        el('td', { textContent: label }),
        el('td', { textContent: `${values[key].toFixed(2)} ${unit}` }),
      ])
    ));
  }

  function quantityInput(entry, type) {
    return el('input', {
      type, min: 0, max: 5000, value: entry.quantity,
      onchange: (event) => setQuantity(entry.id, event.target.value),
    });
  }

  function render(state) {
    if (!state) return;
    const rows = state.entries.map((entry) => el('div', { className: 'entry' }, [
      el('strong', { textContent: entry.food_name || 'Select food' }),
      el('button', {
        textContent: 'Delete', onclick: () => removeEntry(entry.id),
      }),
      el('br'),
      el('input', {
        placeholder: 'Search food...', value: entry.food_name || '',
        onchange: (event) => setFood(entry.id, event.target.value),
      }),
      quantityInput(entry, 'range'),
      quantityInput(entry, 'number'),
      ' g',
      entry.food_name ? nutrientTable(entry.nutrients) : el('table'),
    ]));
    for (const row of rows) row.querySelector('input').setAttribute('list', 'foods');
    document.getElementById('entries').replaceChildren(...rows);
    document.getElementById('totals').replaceWith(
      Object.assign(nutrientTable(state.totals), { id: 'totals' })
    );
  }

  const base = () => `/sessions/${sessionId}`;
  const addEntry = async () => render(await call('POST', `${base()}/entries`));
  const removeEntry = async (id) =>
    render(await call('DELETE', `${base()}/entries/${id}`));
  const setFood = async (id, name) =>
    render(await call('PUT', `${base()}/entries/${id}/food`,
                      { food_name: name || null }));
  const setQuantity = async (id, value) =>
    render(await call('PUT', `${base()}/entries/${id}/quantity`,
                      { quantity: Number(value) }));

  // Release the server-side list when the page goes away.
  window.addEventListener('pagehide', () => {
    if (sessionId) fetch(base(), { method: 'DELETE', keepalive: true });
  });

  (async () => {
    const catalog = await call('GET', '/foods?limit=1000');
    document.getElementById('foods').replaceChildren(
      ...catalog.foods.map((food) => el('option', { value: food.name }))
    );
    const state = await call('POST', '/sessions');
    sessionId = state.session_id;
    render(state);
  })();
</script>
"""
