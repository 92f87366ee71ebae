from arith.config import Settings


def test_defaults() -> None:
    settings = Settings.from_env({})
    assert settings == Settings(prompt=">> ", quit_command="quit", show_tokens=False, show_ast=False, log_level="WARNING")


def test_from_env() -> None:
    settings = Settings.from_env(
        {
            "ARITH_PROMPT": "calc> ",
            "ARITH_QUIT_COMMAND": " exit ",
            "ARITH_SHOW_TOKENS": "Yes",
            "ARITH_SHOW_AST": "0",
            "ARITH_LOG_LEVEL": "debug",
            "UNRELATED": "1",
        }
    )
    assert settings == Settings(prompt="calc> ", quit_command="exit", show_tokens=True, show_ast=False, log_level="DEBUG")
