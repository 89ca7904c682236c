class Config:

    # =====================
    # Network
    # =====================
    hidden_layers = [4, 2]
    activation = "tanh"
    regularization = "none"          # "none", "L1" or "L2"
    problem = "classification"       # regression uses a linear output node
    init_zero = False

    # Inputs (see features.INPUTS)
    input_features = ["x", "y"]

    # =====================
    # Training
    # =====================
    learning_rate = 0.03
    regularization_rate = 0.0
    batch_size = 10
    epochs = 100
    perc_train_data = 50
    seed = None

    # =====================
    # Data
    # =====================
    data_path = "data/points.csv"

    # =====================
    # Logging
    # =====================
    log_path = "out/training.log"
    stats_path = "out/stats.csv"
    collect_stats = False


def network_shape(config: Config):
    return [len(config.input_features)] + list(config.hidden_layers) + [1]


PROBLEMS = {
    "classification": "tanh",
    "regression": "linear",
}


def output_activation_name(config: Config) -> str:
    if config.problem not in PROBLEMS:
        raise ValueError(f"Unknown problem: {config.problem}. Must be one of {list(PROBLEMS.keys())}")
    return PROBLEMS[config.problem]
