class GameIO:
    """Collects the lines written during one turn."""

    def __init__(self):
        self.current_turn_output = []

    def write(self, message):
        self.current_turn_output.append(str(message))

    def write_lines(self, messages):
        for message in messages:
            self.write(message)

    def start_turn(self):
        self.current_turn_output = []

    def turn_output(self):
        return self.current_turn_output[:]
