# vector_visualizer/__init__.py
"""Visualizador interativo de conceitos de álgebra vetorial para gráficos."""
