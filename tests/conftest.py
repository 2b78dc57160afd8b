def pytest_addoption(parser):
    # test modules read `--fast` straight from sys.argv to cut down hypothesis examples
    parser.addoption("--fast", action="store_true", default=False, help="run fewer hypothesis examples")
