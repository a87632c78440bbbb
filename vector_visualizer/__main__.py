# vector_visualizer/__main__.py
from .main import main

main()
