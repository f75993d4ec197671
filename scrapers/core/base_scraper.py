"""
Base Scraper - Clase abstracta para los scrapers de feriados
Proporciona funcionalidad común (descarga, validación, exportación)
y define la interfaz que debe implementar cada fuente.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Optional
from datetime import datetime
import copy
import json
import os
import requests
import pandas as pd
import yaml
from pathlib import Path

from scrapers.core.models import Feriado


CONFIG_PATH = Path(__file__).parent.parent.parent / 'config' / 'peru.yaml'

# Valores por defecto si no existe config/peru.yaml
DEFAULT_CONFIG = {
    'gob_pe': {
        'url': 'https://www.gob.pe/feriados',
        'timeout': 30,
        'headers': {
            'User-Agent': (
                'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
                '(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36'
            ),
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'es-PE,es;q=0.9,en;q=0.8',
        },
        'marcador_sector_publico': 'sector público',
        'cache_control': 'public, s-maxage=120, stale-while-revalidate=60',
    }
}


def load_config(fuente: str, config_path: Optional[Path] = None) -> Dict:
    """
    Carga la configuración de una fuente desde YAML.

    Usa FERIADOS_CONFIG si está definida, si no config/peru.yaml.
    Las claves ausentes se completan con DEFAULT_CONFIG.
    """
    config = copy.deepcopy(DEFAULT_CONFIG.get(fuente, {}))
    config_path = Path(config_path or os.environ.get('FERIADOS_CONFIG') or CONFIG_PATH)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            all_config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"⚠️  Archivo de configuración no encontrado: {config_path}")
        return config

    seccion = all_config.get(fuente) or {}
    headers = {**config.get('headers', {}), **(seccion.get('headers') or {})}
    config.update(seccion)
    config['headers'] = headers
    return config


class BaseScraper(ABC):
    """
    Clase base abstracta para los scrapers de feriados.

    Proporciona:
    - Descarga de contenido HTTP
    - Validación de feriados
    - Guardado en JSON/Excel
    - Resumen por consola

    Los scrapers hijos deben implementar:
    - get_source_url()
    - parse_festivos()
    """

    def __init__(self, fuente: str, config: Optional[Dict] = None):
        """
        Args:
            fuente: Clave de la fuente en config/peru.yaml (ej: 'gob_pe')
            config: Configuración ya cargada (None = leer de YAML)
        """
        self.fuente = fuente
        self.config = config if config is not None else self._load_config()
        self.festivos: List[Feriado] = []

        # Metadatos del último scraping
        self.metadata = {
            'fecha_scraping': None,
            'fuente': None,
            'num_festivos': 0
        }

    def _load_config(self) -> Dict:
        """Carga configuración desde config/peru.yaml"""
        return load_config(self.fuente)

    @abstractmethod
    def get_source_url(self) -> str:
        """Devuelve la URL de la página con los feriados"""
        pass

    @abstractmethod
    def parse_festivos(self, content: str) -> List[Feriado]:
        """
        Extrae los feriados del HTML descargado.
        No debe lanzar excepciones por entradas incompletas.
        """
        pass

    def fetch_content(self, url: str) -> Optional[str]:
        """
        Descarga el HTML de una URL.

        Returns:
            El cuerpo de la respuesta, o None si la descarga falla
            o el servidor responde con un estado no exitoso
        """
        print(f"📥 Descargando: {url}")
        try:
            response = requests.get(
                url,
                headers=self.config.get('headers', {}),
                timeout=self.config.get('timeout', 30)
            )
        except requests.RequestException as e:
            print(f"❌ Error descargando {url}: {e}")
            return None

        if not 200 <= response.status_code < 300:
            print(f"❌ Respuesta no exitosa de {url}: HTTP {response.status_code}")
            return None

        content = response.text
        print(f"✅ Descarga completada ({len(content)} caracteres)")
        return content

    def validate_festivo(self, festivo: Feriado) -> bool:
        """
        Valida que un feriado tenga nombre y texto de fecha.

        Args:
            festivo: Feriado extraído

        Returns:
            True si es válido, False si no
        """
        if not festivo.name or not festivo.date_string:
            print(f"⚠️  Feriado inválido - falta nombre o fecha: {festivo}")
            return False

        return True

    def scrape(self) -> List[Feriado]:
        """
        Ejecuta el proceso completo de scraping.

        Nunca lanza excepción: ante cualquier fallo devuelve lista vacía.

        Returns:
            Lista de feriados extraídos
        """
        self.festivos = []
        self.metadata['fecha_scraping'] = datetime.now().isoformat()
        self.metadata['num_festivos'] = 0

        # 1. Obtener URL
        url = self.get_source_url()
        if not url:
            print("❌ No se pudo obtener URL de la fuente")
            return []

        self.metadata['fuente'] = url

        # 2. Descargar contenido
        content = self.fetch_content(url)
        if content is None:
            print("❌ No se pudo descargar el contenido")
            return []

        # 3. Parsear feriados (implementado por clase hija)
        try:
            festivos = self.parse_festivos(content)
        except Exception as e:
            print(f"❌ Error extrayendo feriados de {url}: {e}")
            return []

        # 4. Validar feriados
        self.festivos = [f for f in festivos if self.validate_festivo(f)]
        self.metadata['num_festivos'] = len(self.festivos)

        print(f"✅ Scraping completado: {len(self.festivos)} feriados ({url})")
        return list(self.festivos)

    def to_dataframe(self) -> pd.DataFrame:
        """Convierte los feriados a DataFrame de pandas"""
        df = pd.DataFrame(
            [
                {'fecha': f.date, 'fecha_texto': f.date_string, 'nombre': f.name}
                for f in self.festivos
            ],
            columns=['fecha', 'fecha_texto', 'nombre']
        )
        if not df.empty:
            df = df.sort_values(['fecha'], kind='stable')
        return df

    def save_to_json(self, filepath: str):
        """
        Guarda feriados en formato JSON.

        Args:
            filepath: Ruta del archivo a guardar
        """
        output = {
            'metadata': self.metadata,
            'festivos': [f.to_dict() for f in self.festivos]
        }

        Path(filepath).parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(output, f, ensure_ascii=False, indent=2)

        print(f"💾 JSON guardado: {filepath}")

    def save_to_excel(self, filepath: str):
        """
        Guarda feriados en formato Excel.

        Args:
            filepath: Ruta del archivo a guardar
        """
        df = self.to_dataframe()

        if df.empty:
            print("⚠️  No hay feriados para guardar en Excel")
            return

        Path(filepath).parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
            df.to_excel(writer, sheet_name='Feriados', index=False)

            metadata_df = pd.DataFrame([self.metadata])
            metadata_df.to_excel(writer, sheet_name='Metadata', index=False)

        print(f"💾 Excel guardado: {filepath}")

    def print_summary(self):
        """Imprime un resumen de los feriados extraídos"""
        if not self.festivos:
            print("⚠️  No hay feriados para mostrar")
            return

        df = self.to_dataframe()

        print(f"\n{'='*80}")
        print(f"📊 RESUMEN - {self.fuente.upper()}")
        print(f"{'='*80}")
        print(f"Fuente: {self.metadata['fuente']}")
        print(f"Total feriados: {len(df)}")

        print(f"\n📅 Feriados:")
        for _, row in df.iterrows():
            print(f"   • {row['fecha']:%Y-%m-%d} - {row['nombre']} ({row['fecha_texto']})")
