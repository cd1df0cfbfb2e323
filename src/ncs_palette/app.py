from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, render_template_string, request

from .config import ExplorerConfig
from .display import swatch, to_hex
from .explorer import Explorer, palette_grid
from .ncs import ParseError, parse

log = logging.getLogger(__name__)


def state_payload(explorer: Explorer, radius: int) -> dict[str, Any]:
    grid = palette_grid(explorer.color, radius)
    return {
        "color": swatch(explorer.color),
        "radius": radius,
        "grid": [[swatch(c) for c in row] for row in grid],
    }


# ----------------------------- Flask app ----------------------------------

INDEX_HTML = """
<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{{ title }}</title>
    <style>
      body { margin: 0; background: #000; font: 12px/1.2 monospace; }
      #board { position: relative; width: {{ board }}px; height: {{ board }}px; }
      .box { position: absolute; width: {{ box }}px; height: {{ box }}px; }
      .box span {
        position: absolute; left: 16px; color: #fff;
        text-shadow: 1px 1px 0 rgba(0, 0, 0, 0.5);
      }
      .box .ncs { top: 16px; }
      .box .hex { top: 30px; }
    </style>
  </head>
  <body>
    <div id="board"></div>
    <script>
      const BOX = {{ box }};
      const board = document.getElementById("board");
      const held = new Set();
      let queue = Promise.resolve();

      function paint(state) {
        board.replaceChildren();
        state.grid.forEach((row, j) => {
          row.forEach((sw, i) => {
            const el = document.createElement("div");
            el.className = "box";
            el.style.left = i * BOX + "px";
            el.style.top = j * BOX + "px";
            el.style.background = sw.hex;
            el.innerHTML = `<span class="ncs">${sw.ncs}</span><span class="hex">${sw.hex}</span>`;
            board.appendChild(el);
          });
        });
        document.title = `{{ title }} - ${state.color.ncs}`;
      }

      // one request in flight at a time so held-key sets arrive in order
      function send() {
        const pressed = Array.from(held);
        queue = queue
          .then(() =>
            fetch("/input", {
              method: "POST",
              headers: { "Content-Type": "application/json" },
              body: JSON.stringify({ pressed }),
            })
          )
          .then((r) => (r.ok ? r.json().then(paint) : null))
          .catch((err) => console.error(err));
      }

      window.addEventListener("keydown", (e) => {
        const k = e.key.toLowerCase();
        if (held.has(k)) return;
        held.add(k);
        send();
      });
      window.addEventListener("keyup", (e) => {
        held.delete(e.key.toLowerCase());
        send();
      });
      window.addEventListener("blur", () => {
        held.clear();
        send();
      });

      fetch("/state").then((r) => r.json()).then(paint);
    </script>
  </body>
</html>
"""


def create_app(config: ExplorerConfig | None = None) -> Flask:
    cfg = config or ExplorerConfig()
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    # An unparsable seed is fatal; let ParseError reach the caller.
    seed = parse(cfg.seed)
    explorer = Explorer(seed, cfg.keymap)
    app.config["NCS_PALETTE"] = cfg
    log.info("seed color %s (%s)", seed, to_hex(seed))

    @app.route("/")
    def index():
        return render_template_string(
            INDEX_HTML, title=cfg.title, box=cfg.box_size, board=cfg.board_size
        )

    @app.route("/state")
    def state():
        try:
            return jsonify(state_payload(explorer, cfg.radius))
        except Exception as exc:
            log.exception("Building state failed")
            return jsonify({"error": str(exc)}), 500

    @app.route("/input", methods=["POST"])
    def handle_input():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({"error": "body must be a JSON object"}), 400
        pressed = data.get("pressed", [])
        if not isinstance(pressed, list) or not all(
            isinstance(k, str) for k in pressed
        ):
            return jsonify({"error": "pressed must be a list of key names"}), 400

        actions = explorer.tick(pressed)
        try:
            payload = state_payload(explorer, cfg.radius)
        except Exception as exc:
            log.exception("Building state failed")
            return jsonify({"error": str(exc)}), 500
        payload["actions"] = [a.name for a in actions]
        return jsonify(payload)

    @app.route("/color")
    def color():
        try:
            c = parse(request.args.get("ncs", ""))
        except ParseError as e:
            return jsonify({"error": f"invalid color: {e}"}), 400
        return jsonify(swatch(c))

    return app
