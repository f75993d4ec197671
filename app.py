from flask import Flask, request, jsonify, make_response
from flask_cors import CORS
import os

from scrapers.core import extract_holidays, filtrar_sector_publico, es_feriado
from scrapers.core.base_scraper import load_config

app = Flask(__name__)
app.json.ensure_ascii = False
app.json.sort_keys = False
CORS(app, send_wildcard=True)

# Configuración de la fuente (config/peru.yaml)
CONFIG = load_config('gob_pe')

USO = (
    "peruvian-holiday-api\n\n"
    "GET /holidays (Query Parameter: public-sector: boolean)\n"
    "GET /is-it-holiday (Query Parameter: public-sector: boolean)"
)


def _incluir_sector_publico() -> bool:
    """Solo public-sector=true incluye los feriados del sector público"""
    return request.args.get('public-sector') == 'true'


async def _feriados_filtrados():
    festivos = await extract_holidays(config=CONFIG)
    return filtrar_sector_publico(
        festivos,
        _incluir_sector_publico(),
        CONFIG.get('marcador_sector_publico', 'sector público')
    )


@app.route('/')
def index():
    """Texto con el uso de la API"""
    response = make_response(USO)
    response.mimetype = 'text/plain'
    return response


@app.route('/holidays')
async def holidays():
    """Lista de feriados de gob.pe"""
    festivos = await _feriados_filtrados()

    response = jsonify([f.to_dict() for f in festivos])
    response.headers['Cache-Control'] = CONFIG['cache_control']
    return response


@app.route('/is-it-holiday')
async def is_it_holiday():
    """¿Hoy es feriado?"""
    festivos = await _feriados_filtrados()
    return jsonify({'isHoliday': es_feriado(festivos)})


@app.route('/health')
def health():
    """Health check"""
    return jsonify({'status': 'ok'})


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5001))
    app.run(host='0.0.0.0', port=port, debug=os.environ.get('FLASK_DEBUG') == '1')
