# oche/server/render.py
"""Server-side HTML for the leaderboard page."""

from __future__ import annotations

import time
from html import escape
from typing import TYPE_CHECKING

from oche.constants import MAX_CHECKOUT

if TYPE_CHECKING:
    from oche.ladder import MatchRecord, RankedPlayer

EMPTY_LEADERBOARD = "No matches yet. Add the first one above."
EMPTY_MATCHES = "No matches recorded."

_PAGE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Oche Ladder</title>
<style>
body {{ font-family: system-ui, sans-serif; max-width: 44rem; margin: 2rem auto; }}
form {{ display: flex; flex-wrap: wrap; gap: .5rem; align-items: end; margin-bottom: 1rem; }}
label {{ display: flex; flex-direction: column; font-size: .9rem; }}
.row {{ display: grid; grid-template-columns: 4rem 1fr 5rem 5rem 7rem; padding: .3rem 0; }}
.header {{ font-weight: bold; border-bottom: 1px solid #888; }}
.up {{ color: #1a7f37; }}
.down {{ color: #cf222e; }}
.empty {{ display: block; color: #666; }}
.error {{ color: #cf222e; }}
</style>
</head>
<body>
<h1>Record a Match</h1>
<form id="match-form" method="post" action="/matches">
<label>Player <input name="player_name" required></label>
<label>Opponent <input name="opponent_name" required></label>
<label>Winner
<select name="winner">
<option value="player">Player</option>
<option value="opponent">Opponent</option>
</select>
</label>
<label>Winning checkout <input name="checkout" type="number" min="0" max="{max_checkout}" step="1" required></label>
<button type="submit">Record</button>
</form>
<p id="form-message" class="{message_class}">{message}</p>
<h1>Leaderboard</h1>
<div id="leaderboard">
<div class="row header"><span>Rank</span><span>Player</span><span>Elo</span><span>Games</span><span>Best Checkout</span></div>
{rows}
</div>
<h2>Recent Matches</h2>
<ul id="matches">
{matches}
</ul>
<h2>Reset</h2>
<form id="reset-form" method="post" action="/reset">
<label>Passphrase <input name="passphrase" type="password" required></label>
<button type="submit">Reset all data</button>
</form>
</body>
</html>
"""


def _movement(entry: RankedPlayer) -> str:
    if entry.movement > 0:
        return f' <span class="up">{entry.arrow}{entry.movement}</span>'
    if entry.movement < 0:
        return f' <span class="down">{entry.arrow}{-entry.movement}</span>'
    return ""


def render_leaderboard_rows(ranking: list[RankedPlayer]) -> str:
    if not ranking:
        return f'<div class="row empty">{EMPTY_LEADERBOARD}</div>'
    rows = []
    for entry in ranking:
        p = entry.player
        rows.append(
            '<div class="row">'
            f"<span>{entry.rank}{_movement(entry)}</span>"
            f"<span>{escape(p.display_name)}</span>"
            f"<span>{p.rating}</span>"
            f"<span>{p.games_played}</span>"
            f"<span>{p.highest_checkout}</span>"
            "</div>"
        )
    return "\n".join(rows)


def render_match_items(matches: list[MatchRecord]) -> str:
    if not matches:
        return f'<li class="empty">{EMPTY_MATCHES}</li>'
    items = []
    for m in matches:
        loser = m.opponent if m.winner == m.player else m.player
        when = time.strftime("%Y-%m-%d %H:%M", time.localtime(m.played_at))
        items.append(
            f"<li><strong>{escape(m.winner)}</strong> beat {escape(loser)}"
            f" &middot; checkout {m.checkout} &middot; <time>{when}</time></li>"
        )
    return "\n".join(items)


def render_page(
    ranking: list[RankedPlayer],
    matches: list[MatchRecord],
    *,
    message: str = "",
    is_error: bool = False,
) -> str:
    return _PAGE.format(
        max_checkout=MAX_CHECKOUT,
        message=escape(message),
        message_class="error" if is_error else "status",
        rows=render_leaderboard_rows(ranking),
        matches=render_match_items(matches),
    )
