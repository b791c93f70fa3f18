# tests/conftest.py
# Agrega src/ al sys.path para que "import scope_context" funcione en pytest
# sin instalar el paquete.
import sys
import os

# calculamos la ruta a la raíz del repositorio (un nivel arriba de tests/)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")

for path in (ROOT, SRC):
    if path not in sys.path:
        sys.path.insert(0, path)
