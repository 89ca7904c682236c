import asyncio
import random

from playground import Trainer, Config, setup_logging
from playground.data import load_examples, split_examples

if __name__ == "__main__":
    config = Config()
    setup_logging(config.log_path)
    examples = load_examples(config.data_path)
    train, test = split_examples(examples, config.perc_train_data, random.Random(config.seed))
    trainer = Trainer(config)
    asyncio.run(trainer.run(train, test))
