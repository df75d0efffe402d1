"""
Jump61: a chain-reaction capture game on an N x N board, with a
minimax player.

Modules:
    config          Search and board settings loaded from TOML
    main            Collaborator-facing functions and the shared Game session
    core.cell       Sides and the immutable square value
    core.board      Legality, spot cascades, undo history, read-only view
    core.evaluator  Static material evaluation
    core.search     Minimax search with alpha-beta pruning
"""
