"""
Tests for the client side binder of the activity selector modal.

The script runs inside a node `vm` context with a stubbed console and
`il.UI.modal`; tests are skipped when node is not installed.
"""
import json
import os
import shutil
import subprocess

import pytest

SCRIPT = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    'nolej_pc', 'static', 'js', 'activity_selector.js',
)

RUNNER = """
const fs = require('fs');
const vm = require('vm');

const [scriptPath, stepsJson] = process.argv.slice(1);
const logs = [];
const calls = [];
const context = {
    encodeURIComponent: encodeURIComponent,
    console: {log: (...args) => logs.push(args.join(' '))},
    il: {UI: {modal: {
        replaceFromSignal: (...args) => calls.push(['replaceFromSignal', ...args]),
        showModal: (...args) => calls.push(['showModal', ...args]),
    }}},
};
vm.createContext(context);
vm.runInContext(fs.readFileSync(scriptPath, 'utf8'), context);

let error = null;
try {
    for (const [name, args] of JSON.parse(stepsJson)) {
        context[name](...args);
    }
} catch (e) {
    error = String(e);
}
process.stdout.write(JSON.stringify({logs, calls, error}));
"""

pytestmark = pytest.mark.skipif(shutil.which('node') is None, reason='node is not installed')


def run_binder(*steps):
    result = subprocess.run(
        ['node', '-e', RUNNER, SCRIPT, json.dumps(steps)],
        capture_output=True, text=True, timeout=30, check=True,
    )
    return json.loads(result.stdout)


class TestBinderScript:
    """Tests for pcnlj_setup_modal and pcnlj_show_modal"""

    def test_show_before_setup(self):
        result = run_binder(['pcnlj_show_modal', [10]])

        assert result['error'] is None
        assert result['logs'] == ['Modal not found.']
        assert result['calls'] == []

    def test_first_setup_wins(self):
        result = run_binder(
            ['pcnlj_setup_modal', ['modal_1', 'signal_1', '/component?cmd=activityModal']],
            ['pcnlj_setup_modal', ['modal_2', 'signal_2', '/other?cmd=activityModal']],
            ['pcnlj_show_modal', [10]],
        )

        assert result['error'] is None
        assert result['logs'] == []
        assert result['calls'] == [
            ['replaceFromSignal', 'modal_1', {'options': {'url': '/component?cmd=activityModal&sel_ref_id=10'}}],
            ['showModal', 'modal_1', {}, {}],
        ]

    def test_missing_signal(self):
        result = run_binder(
            ['pcnlj_setup_modal', ['modal_1', '', '/component?cmd=activityModal']],
            ['pcnlj_show_modal', [10]],
        )

        assert result['error'] is None
        assert result['logs'] == ['Signal missing.']
        assert result['calls'] == []
