"""
Console choice prompts.

Two kinds of prompts are offered. choose_from_list numbers the options and
asks for an index. ShortcutMenu lets the user type either a full option
label or its shortcut, the shortest prefix of the label that is unique among
the options, shown in brackets: "[o]verride, [c]ancel".

Both keep asking until a valid answer is given.
"""

INVALID_CHOICE = "Sorry, invalid choice. Try again"


def choose_from_list(options, message="There are several choices: ",
                     input_func=input, print_func=print):
    """Print a numbered list of options and return the one the user picks."""
    options = list(options)
    if not options:
        raise ValueError("choose_from_list needs at least one option")
    print_func(message)
    index_width = len(str(len(options) - 1)) + 2
    while True:
        for index, option in enumerate(options):
            print_func("{:>{width}} {}".format("[{}]".format(index), option,
                                               width=index_width))
        answer = input_func("which one do you want to use? ")
        try:
            choice = int(answer.strip())
        except ValueError:
            choice = -1
        if 0 <= choice < len(options):
            return options[choice]
        print_func(INVALID_CHOICE + ":")


def assign_shortcuts(labels):
    """
    Map shortcut -> label for the given option labels.

    Shorter labels pick first. A shortcut is the shortest prefix that no
    earlier label claimed and that is not itself one of the labels. Labels
    without such a prefix get no shortcut.
    """
    shortcuts = {}
    for label in sorted(labels, key=len):
        for length in range(1, len(label)):
            prefix = label[:length]
            if prefix not in shortcuts and prefix not in labels:
                shortcuts[prefix] = label
                break
    return shortcuts


def format_option(label, shortcut=None):
    """'override' with shortcut 'o' -> '[o]verride'."""
    if not shortcut:
        return label
    return "[{}]{}".format(shortcut, label[len(shortcut):])


class ShortcutMenu():
    """Menu over labels that can be answered with a label or its shortcut."""

    def __init__(self, labels):
        self.labels = list(labels)
        if not self.labels:
            raise ValueError("ShortcutMenu needs at least one option")
        if len(set(self.labels)) != len(self.labels):
            raise ValueError("ShortcutMenu options must be unique: {}".format(self.labels))
        self.shortcuts = assign_shortcuts(self.labels)
        shortcut_of = {label: shortcut for shortcut, label in self.shortcuts.items()}
        self.formatted_options = [format_option(label, shortcut_of.get(label))
                                  for label in self.labels]

    def options_text(self):
        return ", ".join(self.formatted_options)

    def resolve(self, answer):
        """Label for a typed answer, or None if it matches nothing."""
        answer = answer.strip()
        if answer in self.shortcuts:
            return self.shortcuts[answer]
        if answer in self.labels:
            return answer
        return None

    def ask(self, message, input_func=input, print_func=print):
        """Prompt until the answer resolves to a label and return that label."""
        answer = input_func("{} ({}): ".format(message, self.options_text()))
        while True:
            label = self.resolve(answer)
            if label is not None:
                return label
            print_func("{} ({})".format(INVALID_CHOICE, self.options_text()))
            answer = input_func("")


def choose_option(message, labels, input_func=input, print_func=print):
    """Ask the user to pick one of labels, return the picked label."""
    return ShortcutMenu(labels).ask(message, input_func=input_func,
                                    print_func=print_func)


def choose_action(message, actions, input_func=input, print_func=print):
    """
    Ask the user to pick one of the keys of actions.

    actions maps option labels to zero-argument callables. The callable of
    the chosen label is invoked and its result returned.
    """
    label = choose_option(message, list(actions), input_func=input_func,
                          print_func=print_func)
    return actions[label]()
