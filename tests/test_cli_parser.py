import unittest

from argen.cli.parser import create_parser
from argen.main import command_options
from argen.ui.prompts import PromptFactory


class TestParser(unittest.TestCase):
    def setUp(self):
        self.parser = create_parser()

    def test_no_command_means_interactive(self):
        args = self.parser.parse_args([])
        self.assertIsNone(args.command)
        self.assertIsNone(args.config)

    def test_generate_options(self):
        args = self.parser.parse_args(
            ["--verbose", "generate", "a.json", "b.yaml", "--output-dir", "build", "--match-aliases"]
        )

        self.assertEqual(args.command, "generate")
        self.assertEqual(args.specs, ["a.json", "b.yaml"])
        self.assertEqual(args.output_dir, "build")
        self.assertIsNone(args.output)
        self.assertTrue(args.match_aliases)
        self.assertTrue(args.verbose)

    def test_unset_switches_stay_none(self):
        args = self.parser.parse_args(["preview", "a.json"])
        self.assertIsNone(args.match_aliases)
        self.assertIsNone(args.bind_positionals)

    def test_check_requires_spec(self):
        with self.assertRaises(SystemExit):
            self.parser.parse_args(["check"])

    def test_verbosity_flags_exclusive(self):
        with self.assertRaises(SystemExit):
            self.parser.parse_args(["--debug", "--silent", "check", "a.json"])


class TestCommandOptions(unittest.TestCase):
    def test_only_given_command_options(self):
        parser = create_parser()
        args = parser.parse_args(
            ["--debug", "--config", "c.yaml", "generate", "a.json", "--output-dir", "build",
             "--bind-positionals"]
        )

        self.assertEqual(command_options(args), {"output_dir": "build", "bind_positionals": True})

    def test_nothing_given(self):
        args = create_parser().parse_args(["check", "a.json"])
        self.assertEqual(command_options(args), {})


class TestPromptTypes(unittest.TestCase):
    def setUp(self):
        self.factory = PromptFactory(style=None)

    def test_switches_are_yes_no(self):
        arg_def = {"name": "--match-aliases", "action": "store_true", "default": None}
        self.assertEqual(self.factory.determine_prompt_type(arg_def), "boolean")

    def test_valued_options_are_paths(self):
        self.assertEqual(self.factory.determine_prompt_type({"name": "--output-dir"}), "path")

    def test_given_options_not_prompted(self):
        args = create_parser().parse_args([])
        args.output = "x.c"
        handler_arguments = [{"name": "--output"}, {"name": "--output-dir"}]

        remaining = self.factory.get_unprovided_arguments(args, handler_arguments)

        self.assertEqual(remaining, [{"name": "--output-dir"}])


if __name__ == "__main__":
    unittest.main()
