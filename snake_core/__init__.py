"""
Snake core Python package.

Pure game logic for the terminal snake game, kept apart from the entry
point so each piece can be tested without a real terminal.
Modules:
- position.py: Position, PositionGenerator, board size range
- snake.py: Snake body container
- ansi.py: escape sequences and key codes
- board.py: Board (size validation and ANSI rendering), Renderer
- keys.py: input token -> command mapping
- engine.py: GameEngine state machine and input loop
- terminal.py: TerminalMode raw-mode guard, read_token
- cli.py: command-line entry point
"""
