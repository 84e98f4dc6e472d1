import contextlib
import io
import os
import tempfile
import unittest

from csscolor.cli import create_parser, ingest, main


class TestCli(unittest.TestCase):

    def run_main(self, *args: str) -> tuple[int, list[str]]:
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            status = main(list(args))
        return status, stdout.getvalue().splitlines()

    def test_parser(self) -> None:
        options = create_parser().parse_args(['-vv', 'red'])
        self.assertEqual(options.verbose, 2)
        self.assertEqual(options.quiet, 0)
        self.assertEqual(options.colors, ['red'])

        options = create_parser().parse_args([])
        self.assertIsNone(options.input)
        self.assertEqual(options.colors, [])

        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                create_parser().parse_args(['--swatch', 'red'])

    def test_colors(self) -> None:
        status, lines = self.run_main('red', '#ff000080', 'notacolor')
        self.assertEqual(status, 0)
        self.assertEqual(len(lines), 3)
        self.assertFalse(any("\x1b" in line for line in lines))

        self.assertEqual(lines[0].split(), ['red', '0xff0000ff', 'rgb(255,0,0)', '#ff0000'])
        self.assertEqual(
            lines[1].split(),
            ['#ff000080', '0xff000080', 'rgba(255,0,0,0.5019607843137255)', '#ff000080'],
        )
        self.assertEqual(
            lines[2].split(), ['notacolor', '0x00000000', 'rgba(0,0,0,0)', '#00000000']
        )

    def test_unsupported(self) -> None:
        with self.assertLogs(level='ERROR') as records:
            status, lines = self.run_main('lch(50% 0.1 120)', 'blue')
        self.assertEqual(status, 1)
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith('blue'))
        self.assertIn('"lch"', records.output[0])

    def test_ingest(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'colors.txt')
            with open(path, mode='w', encoding='utf8') as file:
                file.write('// Colors\n#fc0\n\n  rebeccapurple  \n// more\noklab(1 0 0)\n')

            self.assertEqual(
                list(ingest(path)), ['#fc0', 'rebeccapurple', 'oklab(1 0 0)']
            )

            status, lines = self.run_main('-i', path)
            self.assertEqual(status, 0)
            self.assertEqual(
                [line[33:43] for line in lines],
                ['0xffcc00ff', '0x663399ff', '0xffffffff'],
            )


if __name__ == '__main__':
    unittest.main()
