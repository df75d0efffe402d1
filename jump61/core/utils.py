def format_info(depth, value, nodes, elapsed, move, winning_value):
    nps = int(nodes / elapsed) if elapsed > 0 else 0

    if value >= winning_value:
        value_str = "win"
    elif value <= -winning_value:
        value_str = "loss"
    else:
        value_str = f"material {value}"

    return (f"info depth {depth} score {value_str} nodes {nodes} nps {nps} "
            f"time {int(elapsed * 1000)} move {move}")
