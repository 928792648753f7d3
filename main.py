"""
Punto de entrada principal de la demo de Unit of Work
Ejecutar con: python main.py
"""

import sys

if __name__ == "__main__":
    from app.main import main

    sys.exit(main())
