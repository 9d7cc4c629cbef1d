"""FastAPI server exposing a read-only view of the leaderboard."""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from solo_quiz.constants.about import APP_NAME, APP_VERSION
from solo_quiz.constants.network_constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    MAX_LEADERBOARD_PAGE_SIZE,
)
from solo_quiz.constants.quiz_constants import LEADERBOARD_LIMIT
from solo_quiz.core.errors import PersistenceError
from solo_quiz.core.services.leaderboard import LeaderboardStore

logger = logging.getLogger(__name__)

_LEADERBOARD_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>SoloQuiz Leaderboard</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Segoe UI', system-ui, sans-serif; background: #1e1e1e; color: #f5f5f5; }
      body { margin: 0; padding: 1.5rem; }
      .card { background: #2d2d2d; border-radius: 0.75rem; padding: 1.5rem; max-width: 40rem; margin: 0 auto; }
      table { width: 100%; border-collapse: collapse; }
      th, td { text-align: left; padding: 0.4rem 0.6rem; border-bottom: 1px solid #555555; }
      th { color: #aaaaaa; font-weight: 600; }
      #status { color: #ff6b6b; min-height: 1.25rem; }
    </style>
  </head>
  <body>
    <section class=\"card\">
      <h1>Leaderboard</h1>
      <table>
        <thead><tr><th>#</th><th>Name</th><th>Score</th><th>When</th></tr></thead>
        <tbody id=\"rows\"></tbody>
      </table>
      <p id=\"status\"></p>
    </section>
    <script>
      const rows = document.getElementById('rows');
      const statusEl = document.getElementById('status');

      function cell(text) {
        const td = document.createElement('td');
        td.textContent = text;
        return td;
      }

      async function refreshLeaderboard() {
        try {
          const response = await fetch('/leaderboard');
          const payload = await response.json();
          if (!response.ok) {
            statusEl.textContent = payload.detail || 'Leaderboard unavailable.';
            return;
          }
          rows.innerHTML = '';
          payload.forEach(entry => {
            const tr = document.createElement('tr');
            tr.appendChild(cell(entry.rank));
            tr.appendChild(cell(entry.name));
            tr.appendChild(cell(`${entry.score}/${entry.total}`));
            tr.appendChild(cell(entry.timestamp));
            rows.appendChild(tr);
          });
          statusEl.textContent = payload.length ? '' : 'No results yet.';
        } catch (error) {
          console.error('Error fetching leaderboard:', error);
          statusEl.textContent = 'Unable to reach the server.';
        }
      }

      refreshLeaderboard();
      setInterval(refreshLeaderboard, 5000);
    </script>
  </body>
</html>
"""


class LeaderboardRow(BaseModel):
    """Response schema for one ranked leaderboard entry."""

    rank: int
    name: str
    score: int
    total: int
    timestamp: str


def _get_store_dependency(store: LeaderboardStore):
    def dependency() -> LeaderboardStore:
        return store

    return dependency


def create_api_app(store: LeaderboardStore, default_limit: int = LEADERBOARD_LIMIT) -> FastAPI:
    """Create a FastAPI application reading from the provided leaderboard store."""
    app = FastAPI(title=f"{APP_NAME} Leaderboard", version=APP_VERSION)
    store_dep = _get_store_dependency(store)

    @app.get("/", response_class=HTMLResponse)
    def serve_leaderboard_page() -> str:
        return _LEADERBOARD_PAGE_HTML

    @app.get("/leaderboard", response_model=list[LeaderboardRow])
    def get_leaderboard(
        limit: int = Query(default_limit, ge=1, le=MAX_LEADERBOARD_PAGE_SIZE),
        leaderboard: LeaderboardStore = Depends(store_dep),
    ) -> list[LeaderboardRow]:
        try:
            entries = leaderboard.ranked_top(limit)
        except PersistenceError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        return [
            LeaderboardRow(
                rank=rank,
                name=entry.name,
                score=entry.score,
                total=entry.total,
                timestamp=entry.timestamp,
            )
            for rank, entry in enumerate(entries, start=1)
        ]

    return app


def start_api_server(
    store: LeaderboardStore,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    default_limit: int = LEADERBOARD_LIMIT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(store, default_limit=default_limit)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="LeaderboardApiServer", daemon=True)
    thread.start()
    logger.info("Leaderboard viewer listening on http://%s:%d/", host, port)
    return thread
