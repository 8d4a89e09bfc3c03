from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from typeahead import PredictionEngine, UntrainedState, create_from_multiple_sources
from typeahead import config as CFG
from typeahead.loader import load_corpus
from typeahead.samples import CORPORA

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: PredictionEngine | None = None


def set_engine(engine: PredictionEngine | None) -> None:
    global _engine
    _engine = engine


def _require_engine() -> PredictionEngine:
    if _engine is None:
        raise UntrainedState("No engine loaded")
    return _engine


@app.errorhandler(UntrainedState)
def _untrained(exc: UntrainedState):
    return jsonify({"error": str(exc)}), 503


# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", CFG.MAX_COMPLETIONS, type=int)
    rows = _require_engine().get_completions(q, max_results=k)
    return jsonify([r.to_dict() for r in rows])


@app.get("/api/next")
def api_next():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", CFG.MAX_PREDICTIONS, type=int)
    rows = _require_engine().get_next_word(q, max_results=k)
    return jsonify([r.to_dict() for r in rows])


@app.get("/api/phrase")
def api_phrase():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", CFG.MAX_COMPLETIONS, type=int)
    return jsonify(_require_engine().get_next_phrase(q, max_results=k))


@app.get("/api/stats")
def api_stats():
    return jsonify(_require_engine().get_stats().to_dict())


@app.get("/health")
def health():
    trained = _engine is not None and _engine.is_trained
    return jsonify({"ok": True, "trained": trained})


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: completions for the word being typed, next words after a space.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Typeahead • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --danger:#ff5d5d;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:860px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
textarea{
  width:100%; min-height:90px; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; resize:vertical;
}
textarea:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.chips{ display:flex; flex-wrap:wrap; gap:8px; margin-top:14px; min-height:36px; }
.chip{
  padding:6px 10px; border:1px solid var(--border); border-radius:999px; cursor:pointer;
  background:#0b1117; font-variant-numeric:tabular-nums;
}
.chip:hover{ border-color:var(--accent) }
.chip small{ color:var(--muted); margin-left:6px }
.err{ color:var(--danger); margin-top:10px; display:none }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Typeahead</h1>
      <textarea id="q" placeholder="Start typing…" autofocus></textarea>
      <div class="meta" id="mode">Ready.</div>
      <div id="err" class="err"></div>
      <div id="out" class="chips"></div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), out = $("#out"), mode = $("#mode"), err = $("#err");
let t; // debounce timer

function apply(word, completing){
  const text = q.value;
  if(completing){
    q.value = text.replace(/\S+$/, word) + " ";
  }else{
    q.value = text + word + " ";
  }
  q.focus(); suggest();
}

async function suggest(){
  const text = q.value;
  err.style.display = "none";
  if(!text.trim()){ out.innerHTML = ""; mode.textContent = "Ready."; return; }
  const completing = !/\s$/.test(text);
  const url = completing
    ? `/api/complete?q=${encodeURIComponent(text.split(/\s+/).pop())}&k=8`
    : `/api/next?q=${encodeURIComponent(text)}&k=8`;
  try{
    const resp = await fetch(url);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const rows = await resp.json();
    mode.textContent = completing ? "Completing word" : "Next word";
    out.innerHTML = "";
    for(const r of rows){
      const el = document.createElement("span");
      el.className = "chip";
      el.textContent = r.word;
      const s = document.createElement("small");
      s.textContent = `${r.frequency} · ${(r.confidence*100).toFixed(1)}%`;
      el.appendChild(s);
      el.addEventListener("click", ()=>apply(r.word, completing));
      out.appendChild(el);
    }
    if(!rows.length) out.innerHTML = '<span class="meta">No suggestions.</span>';
  }catch(e){
    err.style.display = "block";
    err.textContent = `Error: ${e.message ?? e}`;
  }
}

q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(suggest, 150); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of PredictionEngine")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--roots", nargs="+", help="Folders (or files) to scan for .txt corpora")
    src.add_argument("--sample", choices=sorted(CORPORA), help="Train on a bundled sample corpus")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    if args.roots:
        docs = load_corpus(args.roots)
        if not docs:
            ap.error(f"no non-empty *.txt files under {args.roots}")
        engine = create_from_multiple_sources(docs)
    else:
        engine = PredictionEngine()
        engine.train(CORPORA[args.sample])
    set_engine(engine)
    log.info("Serving %d words on %s:%d", engine.vocabulary_size(), args.host, args.port)

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
