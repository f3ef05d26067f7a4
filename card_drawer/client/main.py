# card_drawer/client/main.py

from card_drawer.common.logging_utils import setup_logging, get_logger
from card_drawer.client.api import DeckApi
from card_drawer.client.session import DeckSessionClient
from card_drawer.client.ui import read_command
from card_drawer.client.cardfx.terminal import TerminalRenderer
from card_drawer.client.cardfx.table import CardTable, TableView


log = get_logger("client.main")


def main() -> None:
    setup_logging()

    rend = TerminalRenderer(clear_each_frame=True)
    table = CardTable()
    api = DeckApi()
    client: DeckSessionClient

    def redraw() -> None:
        table.render(rend, TableView.of(client))

    client = DeckSessionClient(api, on_change=redraw)

    rend.begin()
    try:
        if not client.initialize():
            # no deck -> no controls, just the title and the error
            redraw()
            log.error("No deck available, exiting.")
            return
        redraw()

        while True:
            command = read_command()
            if command == "quit":
                break
            if command == "draw":
                client.toggle_polling()
            elif command == "shuffle":
                client.shuffle()
            elif command == "speed":
                client.toggle_shuffle_speed_preference()
            elif command == "dismiss":
                client.dismiss_error()
            redraw()
    except KeyboardInterrupt:
        log.info("Interrupted, shutting down...")
    finally:
        client.close()
        api.close()
        rend.end()


if __name__ == "__main__":
    main()
