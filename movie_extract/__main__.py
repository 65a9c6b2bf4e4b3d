"""Package entry point. Allows python -m movie_extract."""

from movie_extract.etl.pipeline.cli import main

if __name__ == "__main__":
    main()
