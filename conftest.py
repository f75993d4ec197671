"""
Fixtures compartidas: HTML de ejemplo con la estructura de gob.pe
"""

from unittest.mock import Mock

import pytest


HTML_GOBPE = """
<html>
<body>
  <div class="holidays">
    <div class="holidays__recent-holiday">
      <div class="holidays__recent-holiday-date">15 de agosto</div>
      <div class="holidays__recent-holiday-name">
        Día de <strong>Santa</strong>
        Rosa
      </div>
    </div>
    <ul class="holidays__list">
      <li class="holidays__list-item"><span class="holidays__list-item-date">3 de octubre</span><span class="holidays__list-item-name">Combate de   Angamos</span></li>
      <li class="holidays__list-item"><span class="holidays__list-item-date">8 de diciembre sector público</span><span class="holidays__list-item-name">Inmaculada <em>Concepción</em></span></li>
    </ul>
  </div>
</body>
</html>
"""


@pytest.fixture
def respuesta_http():
    """Fábrica de respuestas de requests simuladas"""
    def _crear(text: str = "", status_code: int = 200) -> Mock:
        return Mock(text=text, status_code=status_code, ok=200 <= status_code < 300)
    return _crear


@pytest.fixture
def html_gobpe():
    return HTML_GOBPE


@pytest.fixture
def config_gobpe():
    """Configuración fija, sin depender de config/peru.yaml"""
    return {
        'url': 'https://www.gob.pe/feriados',
        'timeout': 5,
        'headers': {
            'User-Agent': 'Mozilla/5.0 (X11; Linux x86_64) Firefox/125.0',
            'Accept': 'text/html,application/xhtml+xml',
        },
        'marcador_sector_publico': 'sector público',
        'cache_control': 'public, s-maxage=120, stale-while-revalidate=60',
    }
