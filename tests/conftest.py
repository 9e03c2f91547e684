import httpx
import pytest
import pytest_asyncio

from main import app

SAMPLE_DIFF_LINES = [
    "@@ -73,6 +73,23 @@",
    "     - uses: actions/checkout@v4",
    "     - name: ${{ matrix.name }}",
    "       run: make test_SPM test_install_SPM",
    "+  SPMSQLCipher:",
    "+    name: SPM",
    "+    runs-on: ${{ matrix.runsOn }}",
    "+    env:",
    '+      DEVELOPER_DIR: "/Applications/${{ matrix.xcode }}/Contents/Developer"',
    "+    timeout-minutes: 60",
    "+    strategy:",
    "+      fail-fast: false",
    "+      matrix:",
    "+        include:",
    '+          - xcode: "Xcode_16.1.app"',
    "+            runsOn: macOS-14",
    '+            name: "Xcode 16.1"',
    "+    steps:",
    "+      - uses: actions/checkout@v4",
    "+      - name: ${{ matrix.name }}",
    '+        run: GRDBCIPHER="https://github.com/skiptools/swift-sqlcipher.git#1.2.1" swift test',
    " SQLCipher3:",
    "   name: SQLCipher3",
    "   runs-on: ${{ matrix.runsOn }}",
    "@@ -141,4 +158,4 @@ jobs:",
    "     - uses: actions/checkout@v4",
    "     - name: ${{ matrix.name }}",
    "       run: make test_universal_xcframework",
    "-    ",
    "\\ No newline at end of file",
    "+    ",
]


@pytest.fixture
def sample_diff() -> str:
    return "\n".join(SAMPLE_DIFF_LINES)


@pytest_asyncio.fixture
async def api_client():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
