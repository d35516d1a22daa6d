from setuptools import setup

setup(
    name="hexgraph",
    version="0.1.0",
    description="Hex on a weighted graph: win detection and Monte Carlo move selection",
    py_modules=[
        "hex_types",
        "hex_graph",
        "hex_board",
        "hex_evaluator",
        "hex_game",
        "monte_carlo_player",
        "random_player",
        "hex_arena",
    ],
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["hex-arena=hex_arena:main"]},
)
