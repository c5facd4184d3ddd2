from create_chatterino_plugin.cli import run

if __name__ == "__main__":
    run()
