"""Create the sample datasets: ``python -m survey_datasets``."""

from .data_generation.generator import run


def main():
    run()


if __name__ == "__main__":
    main()
