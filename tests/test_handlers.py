import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from rich.console import Console

from argen.config.options import GenerationOptions
from argen.handlers.check import CheckHandler, CheckOptions
from argen.handlers.generate import GenerateHandler, GenerateOptions
from argen.handlers.preview import PreviewHandler, PreviewOptions
from argen.handlers.registry import (
    get_all_handlers,
    get_handler,
    get_menu_handlers,
    load_all_handlers,
    register_handler,
)
from argen.main import main
from argen.utils.logging_manager import LogLevel, set_verbosity
from argen.utils.summary_display import SummaryDisplay

VALID = {
    "positional": [{"c_var": "infile", "c_type": "char*", "help": "file to read"}],
    "non_positional": [
        {"c_var": "port", "c_type": "int32", "name": "port", "short": "p",
         "aliases": ["listen"], "required": True},
        {"c_var": "host", "c_type": "char*", "name": "host", "default": "localhost"},
    ],
}

INVALID = {
    "positional": [],
    "non_positional": [{"c_var": "port", "c_type": "int32", "name": "port", "short": "ab"}],
}


class HandlerTestCase(unittest.TestCase):
    def setUp(self):
        set_verbosity(LogLevel.NORMAL)
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.status = io.StringIO()
        self.output = io.StringIO()
        self.display = SummaryDisplay(
            console=Console(file=self.status, width=200),
            output_console=Console(file=self.output, width=200),
        )

    def tearDown(self):
        self._tmp.cleanup()

    def write_spec(self, name: str, data: dict) -> Path:
        path = self.root / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def environment(self, **overrides):
        env = {"spec_dir": self.root, "output_dir": None, "generation_options": GenerationOptions()}
        env.update(overrides)
        return env


class TestGenerateHandler(HandlerTestCase):
    def test_writes_next_to_spec(self):
        spec_path = self.write_spec("server.json", VALID)
        handler = GenerateHandler(self.environment(), display=self.display)

        results = handler.execute([str(spec_path)], GenerateOptions())

        self.assertEqual(results, {str(spec_path): True})
        code = (self.root / "server.c").read_text(encoding="utf-8")
        self.assertIn("int main(int argc, char **argv) {", code)
        self.assertIn('*host = "localhost";', code)
        self.assertIn("server", self.status.getvalue())

    def test_spec_found_relative_to_spec_dir(self):
        self.write_spec("server.json", VALID)
        handler = GenerateHandler(self.environment(), display=self.display)

        handler.execute(["server.json"], GenerateOptions())

        self.assertTrue((self.root / "server.c").exists())

    def test_output_dir_from_options_and_environment(self):
        spec_path = self.write_spec("server.json", VALID)

        handler = GenerateHandler(self.environment(output_dir=self.root / "env"), display=self.display)
        handler.execute([str(spec_path)], GenerateOptions())
        self.assertTrue((self.root / "env" / "server.c").exists())

        handler.execute([str(spec_path)], GenerateOptions(output_dir=str(self.root / "opt")))
        self.assertTrue((self.root / "opt" / "server.c").exists())

    def test_explicit_output(self):
        spec_path = self.write_spec("server.json", VALID)
        target = self.root / "out" / "parser.c"
        handler = GenerateHandler(self.environment(), display=self.display)

        handler.execute([str(spec_path)], GenerateOptions(output=str(target)))

        self.assertTrue(target.exists())
        self.assertFalse((self.root / "server.c").exists())

    def test_output_to_stdout(self):
        spec_path = self.write_spec("server.json", VALID)
        handler = GenerateHandler(self.environment(), display=self.display)

        buffer = io.StringIO()
        with redirect_stdout(buffer):
            handler.execute([str(spec_path)], GenerateOptions(output="-"))

        self.assertTrue(buffer.getvalue().startswith("#include <stdbool.h>\n"))
        self.assertFalse((self.root / "server.c").exists())

    def test_single_output_with_many_specs_rejected(self):
        first = self.write_spec("a.json", VALID)
        second = self.write_spec("b.json", VALID)
        handler = GenerateHandler(self.environment(), display=self.display)

        with self.assertRaises(ValueError):
            handler.execute([str(first), str(second)], GenerateOptions(output="x.c"))

    def test_colliding_output_paths_rejected(self):
        json_spec = self.write_spec("server.json", VALID)
        yaml_spec = self.root / "server.yaml"
        yaml_spec.write_text(json.dumps(VALID), encoding="utf-8")
        handler = GenerateHandler(self.environment(), display=self.display)

        for options in [GenerateOptions(), GenerateOptions(output_dir=str(self.root / "out"))]:
            with self.subTest(options=options):
                with self.assertRaises(ValueError) as cm:
                    handler.execute([str(json_spec), str(yaml_spec)], options)
                self.assertIn("server.c", str(cm.exception))

        self.assertFalse((self.root / "server.c").exists())
        self.assertFalse((self.root / "out").exists())

    def test_invalid_spec_writes_nothing(self):
        good = self.write_spec("good.json", VALID)
        bad = self.write_spec("bad.json", INVALID)
        handler = GenerateHandler(self.environment(), display=self.display)

        with self.assertRaises(RuntimeError) as cm:
            handler.execute([str(good), str(bad)], GenerateOptions())

        self.assertIn("invalid short name 'ab'", str(cm.exception))
        self.assertFalse((self.root / "good.c").exists())
        self.assertFalse((self.root / "bad.c").exists())

    def test_configured_options_and_overrides(self):
        spec_path = self.write_spec("server.json", VALID)
        configured = GenerationOptions(match_aliases=True)
        handler = GenerateHandler(
            self.environment(generation_options=configured), display=self.display
        )

        handler.execute([str(spec_path)], GenerateOptions())
        code = (self.root / "server.c").read_text(encoding="utf-8")
        self.assertIn('!strcmp(argv[i], "--listen")', code)
        self.assertNotIn("i - arg_count - 1 == 0", code)

        handler.execute(
            [str(spec_path)], GenerateOptions(match_aliases=False, bind_positionals=True)
        )
        code = (self.root / "server.c").read_text(encoding="utf-8")
        self.assertNotIn('"--listen"', code.split("void parse_args")[1])
        self.assertIn("i - arg_count - 1 == 0", code)


class TestCheckAndPreviewHandlers(HandlerTestCase):
    def test_check_lists_arguments(self):
        spec_path = self.write_spec("server.json", VALID)
        handler = CheckHandler(self.environment(), display=self.display)

        results = handler.execute([str(spec_path)], CheckOptions())

        self.assertEqual(results, {str(spec_path): True})
        rendered = self.status.getvalue()
        for text in ["infile", "port", "--port -p --listen", "localhost"]:
            self.assertIn(text, rendered)

    def test_check_reports_every_invalid_spec(self):
        first = self.write_spec("one.json", INVALID)
        second = self.write_spec("two.json", {"positional": []})
        handler = CheckHandler(self.environment(), display=self.display)

        with self.assertRaises(RuntimeError) as cm:
            handler.execute([str(first), str(second)], CheckOptions())

        message = str(cm.exception)
        self.assertIn("one.json", message)
        self.assertIn("two.json", message)

    def test_preview_prints_source(self):
        spec_path = self.write_spec("server.json", VALID)
        handler = PreviewHandler(self.environment(), display=self.display)

        handler.execute([str(spec_path)], PreviewOptions())

        self.assertIn("parse_args", self.output.getvalue())
        self.assertFalse((self.root / "server.c").exists())


class TestRegistry(unittest.TestCase):
    def test_handlers_registered(self):
        load_all_handlers()
        for name in ["generate", "check", "preview"]:
            self.assertIsNotNone(get_handler(name), name)

    def test_create_options_filters_unknown(self):
        load_all_handlers()
        options = get_handler("check").create_options({"output": "x.c"})
        self.assertIsInstance(options, CheckOptions)

        options = get_handler("generate").create_options({"output": "x.c", "verbose": True})
        self.assertEqual(options, GenerateOptions(output="x.c"))

    def test_every_command_takes_specs(self):
        load_all_handlers()
        for info in get_all_handlers():
            self.assertEqual(info.cli_arguments[0]["name"], "specs", info.name)

    def test_menu_sorted_by_label(self):
        load_all_handlers()
        labels = [info.menu_name for info in get_menu_handlers()]
        self.assertEqual(labels, sorted(labels))
        self.assertEqual(len(labels), 3)

    def test_duplicate_registration_rejected(self):
        load_all_handlers()
        with self.assertRaises(ValueError):
            register_handler(get_handler("check"))


class TestMain(HandlerTestCase):
    def test_generate_command(self):
        spec_path = self.write_spec("server.json", VALID)

        self.assertEqual(main(["--silent", "generate", str(spec_path)]), 0)
        self.assertTrue((self.root / "server.c").exists())

    def test_generate_to_stdout_with_options(self):
        spec_path = self.write_spec("server.json", VALID)

        buffer = io.StringIO()
        with redirect_stdout(buffer):
            status = main(
                ["--silent", "generate", str(spec_path), "--output", "-", "--bind-positionals"]
            )

        self.assertEqual(status, 0)
        self.assertIn("*infile = argv[i];", buffer.getvalue())

    def test_invalid_spec_exit_status(self):
        spec_path = self.write_spec("bad.json", INVALID)

        self.assertEqual(main(["--silent", "check", str(spec_path)]), 1)
        self.assertEqual(main(["--silent", "generate", str(spec_path)]), 1)
        self.assertFalse((self.root / "bad.c").exists())

    def test_missing_config_file(self):
        spec_path = self.write_spec("server.json", VALID)
        missing = str(self.root / "missing.yaml")

        self.assertEqual(main(["--silent", "--config", missing, "check", str(spec_path)]), 1)


if __name__ == "__main__":
    unittest.main()
