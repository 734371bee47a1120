from textual.message import Message


class QuitRequestedMessage(Message):
    """
    broadcasted when the app is about to quit
    """

    bubble = True


class PageChangedMessage(Message):
    """
    Fired after any command that may have moved GlobalState to another page.
    Must be posted at App level; the app then switches to the mode of that page.
    """

    bubble = True
