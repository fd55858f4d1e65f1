# app.py
from pathlib import Path
import sys
import logging
import importlib
import streamlit as st

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("securepass.app")

# ==== Streamlit ====
st.set_page_config(
    page_title="securepass",
    page_icon="🔐",
    layout="wide",
)

# ==== Pages ====
required_modules = {
    "home_page":     "🏠 Home",
    "password_page": "🔐 Passwords",
    "audit_page":    "📊 Sampler audit",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' has no render().")
    except ImportError as e:
        logger.exception("Failed to import ui.%s", mod_name)
        errors.append(f"Failed to import 'ui.{mod_name}': {e}")

for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar ====
choice = st.sidebar.radio("Pages", list(PAGES.keys()))
PAGES[choice]()
