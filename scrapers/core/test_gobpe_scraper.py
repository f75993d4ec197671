"""
Tests del scraper de gob.pe con HTML de ejemplo
"""

import asyncio
from unittest.mock import patch

import pytest
import requests

from scrapers.core.gobpe_scraper import GobPeScraper, extract_holidays
from scrapers.core.models import Feriado


@pytest.fixture
def scraper(config_gobpe):
    return GobPeScraper(config=config_gobpe)


@pytest.fixture
def mock_get():
    with patch('scrapers.core.base_scraper.requests.get') as mock:
        yield mock


def test_extrae_proximo_feriado_y_lista_en_orden(scraper, mock_get, respuesta_http, html_gobpe):
    mock_get.return_value = respuesta_http(html_gobpe)

    festivos = scraper.scrape()

    assert [(f.date_string, f.name) for f in festivos] == [
        ("15 de agosto", "Día de Santa Rosa"),
        ("3 de octubre", "Combate de Angamos"),
        ("8 de diciembre sector público", "Inmaculada Concepción"),
    ]
    assert [(f.date.month, f.date.day) for f in festivos] == [(8, 15), (10, 3), (12, 8)]


def test_peticion_con_cabeceras_de_navegador(scraper, mock_get, respuesta_http, html_gobpe):
    mock_get.return_value = respuesta_http(html_gobpe)

    scraper.scrape()

    mock_get.assert_called_once()
    args, kwargs = mock_get.call_args
    assert args[0] == 'https://www.gob.pe/feriados'
    assert 'Mozilla' in kwargs['headers']['User-Agent']
    assert 'text/html' in kwargs['headers']['Accept']
    assert kwargs['timeout'] == 5


def test_url_explicita_tiene_prioridad(config_gobpe, mock_get, respuesta_http):
    mock_get.return_value = respuesta_http("<html></html>")

    GobPeScraper(url='https://example.com/feriados', config=config_gobpe).scrape()

    assert mock_get.call_args[0][0] == 'https://example.com/feriados'


def test_fecha_partida_en_varios_span(scraper):
    html = """
    <ul>
      <li class="holidays__list-item">
        <span class="holidays__list-item-date">Miércoles</span>
        <span class="holidays__list-item-date"> 23 de
          julio: </span>
        <span class="holidays__list-item-name">Fiesta   de la Fuerza Aérea</span></li>
    </ul>
    """

    festivos = scraper.parse_festivos(html)

    assert len(festivos) == 1
    assert festivos[0].date_string == "Miércoles 23 de julio"
    assert festivos[0].name == "Fiesta de la Fuerza Aérea"
    assert (festivos[0].date.month, festivos[0].date.day) == (7, 23)


def test_entradas_incompletas_se_descartan(scraper):
    html = """
    <div class="holidays__recent-holiday">
      <div class="holidays__recent-holiday-date">28 de julio</div>
      <div class="holidays__recent-holiday-name">   </div>
    </div>
    <ul>
      <li class="holidays__list-item"><span class="holidays__list-item-date">25 de diciembre</span></li>
      <li class="holidays__list-item"><span class="holidays__list-item-name">Sin fecha</span></li>
      <li class="holidays__list-item"><span class="holidays__list-item-date">1 de mayo</span><span class="holidays__list-item-name">Día del Trabajo</span></li>
    </ul>
    """

    festivos = scraper.parse_festivos(html)

    assert [f.name for f in festivos] == ["Día del Trabajo"]


def test_fecha_no_reconocida_usa_fallback(scraper, capsys):
    html = """
    <ul><li class="holidays__list-item">
      <span class="holidays__list-item-date">Por definir</span>
      <span class="holidays__list-item-name">Feriado regional</span>
    </li></ul>
    """

    festivos = scraper.parse_festivos(html)

    assert len(festivos) == 1
    assert festivos[0].date_string == "Por definir"
    assert "No se pudo parsear la fecha" in capsys.readouterr().out


def test_dia_desbordado_no_descarta_los_demas(scraper, mock_get, respuesta_http, capsys):
    html = """
    <ul>
      <li class="holidays__list-item"><span class="holidays__list-item-date">99999999999999999999 de julio</span><span class="holidays__list-item-name">Fecha rota</span></li>
      <li class="holidays__list-item"><span class="holidays__list-item-date">1 de mayo</span><span class="holidays__list-item-name">Día del Trabajo</span></li>
    </ul>
    """
    mock_get.return_value = respuesta_http(html)

    festivos = scraper.scrape()

    assert [f.name for f in festivos] == ["Fecha rota", "Día del Trabajo"]
    assert (festivos[1].date.month, festivos[1].date.day) == (5, 1)
    assert "No se pudo parsear la fecha" in capsys.readouterr().out


def test_html_sin_feriados_devuelve_lista_vacia(scraper, mock_get, respuesta_http):
    mock_get.return_value = respuesta_http("<html><body><p>Mantenimiento</p></body></html>")

    assert scraper.scrape() == []


@pytest.mark.parametrize("status_code", [102, 301, 304, 403, 404, 500, 503])
def test_respuesta_no_exitosa_devuelve_lista_vacia(scraper, mock_get, respuesta_http, html_gobpe, status_code, capsys):
    mock_get.return_value = respuesta_http(html_gobpe, status_code=status_code)

    assert scraper.scrape() == []
    assert f"HTTP {status_code}" in capsys.readouterr().out


def test_error_de_red_devuelve_lista_vacia(scraper, mock_get):
    mock_get.side_effect = requests.ConnectionError("sin conexión")

    assert scraper.scrape() == []


def test_error_al_parsear_devuelve_lista_vacia(scraper, mock_get, respuesta_http, html_gobpe, capsys):
    mock_get.return_value = respuesta_http(html_gobpe)

    with patch.object(GobPeScraper, 'parse_festivos', side_effect=RuntimeError("html roto")):
        assert scraper.scrape() == []

    assert "html roto" in capsys.readouterr().out


def test_scrape_es_idempotente(scraper, mock_get, respuesta_http, html_gobpe):
    mock_get.return_value = respuesta_http(html_gobpe)

    primera = scraper.scrape()
    segunda = scraper.scrape()

    assert primera == segunda
    assert len(segunda) == 3
    assert scraper.metadata['num_festivos'] == 3


def test_extract_holidays_async(mock_get, respuesta_http, html_gobpe, config_gobpe):
    mock_get.return_value = respuesta_http(html_gobpe)

    festivos = asyncio.run(extract_holidays(config=config_gobpe))

    assert len(festivos) == 3
    assert all(isinstance(f, Feriado) for f in festivos)


def test_extract_holidays_nunca_lanza(mock_get, config_gobpe):
    mock_get.side_effect = requests.Timeout("timeout")

    assert asyncio.run(extract_holidays('https://www.gob.pe/feriados', config_gobpe)) == []


def test_guardar_json_y_excel(scraper, mock_get, respuesta_http, html_gobpe, tmp_path):
    import json
    import pandas as pd

    mock_get.return_value = respuesta_http(html_gobpe)
    scraper.scrape()

    json_path = tmp_path / 'salida' / 'feriados.json'
    excel_path = tmp_path / 'salida' / 'feriados.xlsx'
    scraper.save_to_json(str(json_path))
    scraper.save_to_excel(str(excel_path))

    data = json.loads(json_path.read_text(encoding='utf-8'))
    assert data['metadata']['num_festivos'] == 3
    assert data['festivos'][0]['name'] == "Día de Santa Rosa"

    df = pd.read_excel(excel_path, sheet_name='Feriados')
    assert len(df) == 3
    assert set(df['nombre']) == {"Día de Santa Rosa", "Combate de Angamos", "Inmaculada Concepción"}
