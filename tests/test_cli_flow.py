"""
Tests for the CLI flow with ffmpeg mocked out.
"""
import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from types import SimpleNamespace
from unittest.mock import patch

from xclips import cli


def _ok(*_args, **_kwargs):
    return SimpleNamespace(returncode=0)


class TestCliFlow(unittest.TestCase):
    def setUp(self):
        # Keep any xclips.yml in the developer's cwd out of the way
        patcher = patch('xclips.cli.find_default_config', return_value=None)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = cli.main(argv)
        return code, out.getvalue(), err.getvalue()

    def _spans_file(self, content):
        with tempfile.NamedTemporaryFile('w', suffix='.txt', delete=False) as f:
            f.write(content)
        self.addCleanup(os.unlink, f.name)
        return f.name

    @patch('subprocess.run', side_effect=_ok)
    def test_zero_spans_exits_zero_without_ffmpeg(self, mock_run):
        code, _, _ = self._run(['movie.mp4'])
        self.assertEqual(code, 0)
        mock_run.assert_not_called()

    @patch('subprocess.run', side_effect=_ok)
    def test_malformed_clip_exits_one_without_ffmpeg(self, mock_run):
        code, _, err = self._run(['movie.mp4', '-c', 'abc-def'])
        self.assertEqual(code, 1)
        self.assertIn('cannot parse abc-def as a time span', err)
        mock_run.assert_not_called()

    @patch('subprocess.run', side_effect=_ok)
    def test_single_clip_command(self, mock_run):
        code, _, _ = self._run(['movie.mp4', '-c', '1:30-1:45'])
        self.assertEqual(code, 0)
        mock_run.assert_called_once_with(
            ['ffmpeg', '-ss', '90.000', '-i', 'movie.mp4', '-t', '15.000', '-c', 'copy', 'movie_clip.mp4']
        )

    @patch('subprocess.run', side_effect=_ok)
    def test_file_and_clip_spans_are_merged_and_sorted(self, mock_run):
        path = self._spans_file("20-25\n5-6\n")
        code, _, _ = self._run(['movie.mp4', '-f', path, '-c', '10-11', '-o', 'out/cut.mkv'])
        self.assertEqual(code, 0)
        commands = [c.args[0] for c in mock_run.call_args_list]
        self.assertEqual([c[2] for c in commands], ['5.000', '10.000', '20.000'])
        self.assertEqual([c[-1] for c in commands],
                         ['out/cut_clip0.mkv', 'out/cut_clip1.mkv', 'out/cut_clip2.mkv'])
        # input is always FILE, not the --output basis
        self.assertTrue(all(c[4] == 'movie.mp4' for c in commands))

    @patch('subprocess.run', side_effect=_ok)
    def test_missing_timestamps_file(self, mock_run):
        code, _, err = self._run(['movie.mp4', '-f', '/nonexistent/spans.txt'])
        self.assertEqual(code, 1)
        self.assertIn('cannot open file: /nonexistent/spans.txt', err)
        mock_run.assert_not_called()

    @patch('subprocess.run', side_effect=_ok)
    def test_missing_extension(self, mock_run):
        code, _, err = self._run(['movie', '-c', '1-2'])
        self.assertEqual(code, 1)
        self.assertIn('output filename does not have a file extension', err)
        mock_run.assert_not_called()

    @patch('subprocess.run', return_value=SimpleNamespace(returncode=1))
    def test_stops_at_first_ffmpeg_failure(self, mock_run):
        code, _, err = self._run(['movie.mp4', '-c', '1-2', '-c', '3-4'])
        self.assertEqual(code, 1)
        self.assertIn('non-zero exit status', err)
        self.assertEqual(mock_run.call_count, 1)

    @patch('subprocess.run', side_effect=OSError('no such file'))
    def test_spawn_failure(self, _):
        code, _, err = self._run(['movie.mp4', '-c', '1-2'])
        self.assertEqual(code, 1)
        self.assertIn('failed to spawn ffmpeg', err)

    @patch('subprocess.run', side_effect=_ok)
    def test_dry_run_prints_plan_only(self, mock_run):
        code, out, _ = self._run(['movie.mp4', '-c', '1:01:01.5-1:01:02', '--dry-run'])
        self.assertEqual(code, 0)
        mock_run.assert_not_called()
        self.assertIn('movie_clip.mp4', out)
        self.assertIn('3661.500', out)
        self.assertIn('01:01:01.500', out)

    @patch('subprocess.run', side_effect=_ok)
    def test_empty_timestamps_file_path_is_fatal(self, mock_run):
        code, _, err = self._run(['movie.mp4', '-f', ''])
        self.assertEqual(code, 1)
        self.assertIn('cannot open file: ', err)
        mock_run.assert_not_called()

    @patch('subprocess.run', side_effect=_ok)
    def test_empty_output_is_not_replaced_by_input(self, mock_run):
        code, _, err = self._run(['movie.mp4', '-o', '', '-c', '1-2'])
        self.assertEqual(code, 1)
        self.assertIn('output filename does not have a file extension', err)
        mock_run.assert_not_called()

    def test_usage_errors_exit_one(self):
        code, _, err = self._run([])
        self.assertEqual(code, 1)
        self.assertIn('FILE', err)

    def test_help_exits_zero(self):
        code, out, _ = self._run(['--help'])
        self.assertEqual(code, 0)
        self.assertIn('--timestamps-file', out)

    def test_collect_spans_without_file(self):
        spans = cli.collect_spans(None, ['3-4', '1-2'])
        self.assertEqual([s.start.seconds for s in spans], [1, 3])
        self.assertEqual(cli.collect_spans(None, []), [])


class TestCliConfig(unittest.TestCase):
    def _config(self, content):
        with tempfile.NamedTemporaryFile('w', suffix='.yml', delete=False) as f:
            f.write(content)
        self.addCleanup(os.unlink, f.name)
        return f.name

    @patch('subprocess.run', side_effect=_ok)
    def test_clips_and_binary_from_config(self, mock_run):
        path = self._config("clips:\n  - 4-5\nffmpeg:\n  binary: /opt/ffmpeg/bin/ffmpeg\n")
        with redirect_stderr(io.StringIO()):
            code = cli.main(['talk.mp3', '--config', path])
        self.assertEqual(code, 0)
        mock_run.assert_called_once_with(
            ['/opt/ffmpeg/bin/ffmpeg', '-ss', '4.000', '-i', 'talk.mp3', '-t', '1.000', '-c', 'copy', 'talk_clip.mp3']
        )

    @patch('subprocess.run', side_effect=_ok)
    def test_cli_clips_override_config_clips(self, mock_run):
        path = self._config("clips: ['4-5']\n")
        with redirect_stderr(io.StringIO()):
            code = cli.main(['talk.mp3', '--config', path, '-c', '7-8'])
        self.assertEqual(code, 0)
        self.assertEqual(mock_run.call_args.args[0][2], '7.000')

    def test_unknown_log_level(self):
        path = self._config("log_level: chatty\n")
        err = io.StringIO()
        with redirect_stderr(err):
            code = cli.main(['talk.mp3', '--config', path])
        self.assertEqual(code, 1)
        self.assertIn('unknown log level', err.getvalue())

    def test_missing_config_file(self):
        err = io.StringIO()
        with redirect_stderr(err):
            code = cli.main(['talk.mp3', '--config', '/nonexistent/xclips.yml'])
        self.assertEqual(code, 1)
        self.assertIn('cannot load configuration file', err.getvalue())


if __name__ == '__main__':
    unittest.main()
