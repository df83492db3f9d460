"""Shared fixtures: a trimmed-down class/job page and view-source helper."""

from __future__ import annotations

import html

import pytest

from classjob.config import settings

CLASS_JOB_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Class/Job | FINAL FANTASY XIV, The Lodestone</title></head>
<body>
  <div class="frame__chara">
    <p class="frame__chara__name">  Alyx
      Rowan </p>
    <p class="frame__chara__world">Cactuar [Aether]</p>
  </div>
  <div class="character__content">
    <h4 class="heading--lead"><img src="https://img.test/tank.png" alt="">Tank</h4>
    <p class="note">Role description.</p>
    <ul class="character__job">
      <li>
        <div><img src="https://img.test/pld.png" alt=""></div>
        <div>90</div>
        <div data-tooltip="Paladin / Gladiator">Paladin</div>
        <div>-- / --</div>
      </li>
      <li>
        <div><img src="https://img.test/war.png" alt=""></div>
        <div>72</div>
        <div>Warrior</div>
        <div>1,234 / 5,600</div>
      </li>
    </ul>
    <h4 class="heading--lead"><img src="https://img.test/healer.png" alt="">Healer</h4>
    <ul class="character__job">
      <li>
        <div><img src="https://img.test/cnj.png" alt=""></div>
        <div>0</div>
        <div>-</div>
        <div>Conjurer</div>
        <div>0 / 0</div>
      </li>
      <li>
        <div>0</div>
        <div>-</div>
        <div>0 / 0</div>
      </li>
    </ul>
    <h4>Other Content</h4>
    <ul><li><div>Gold Saucer</div></li></ul>
    <h4><img src="https://img.test/hand.png" alt="">Disciples of the Hand</h4>
    <ul>
      <li>
        <div>100</div>
        <div title="Carpenter">Carpenter</div>
        <div>0 / 0</div>
      </li>
    </ul>
  </div>
</body>
</html>
"""


def to_view_source(page: str) -> str:
    """Render *page* the way a browser's view-source table does."""
    rows = []
    for number, line in enumerate(page.splitlines(), start=1):
        escaped = html.escape(line, quote=True)
        rows.append(
            f'<tr><td class="line-number" value="{number}"></td>'
            f'<td class="line-content"><span class="html-tag">{escaped}</span></td></tr>'
        )
    return "<html><body><table><tbody>" + "".join(rows) + "</tbody></table></body></html>"


@pytest.fixture()
def class_job_html() -> str:
    return CLASS_JOB_HTML


@pytest.fixture()
def lodestone_base(monkeypatch) -> str:
    """Point the fetcher at a fake upstream host."""
    base = "https://lodestone.test/lodestone/character"
    monkeypatch.setattr(settings, "lodestone_base_url", base)
    return base
