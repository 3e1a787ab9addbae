import pytest

HEADER = """Incident Identifier: 6F1C2A3B-0000-4000-8000-123456789ABC
Process:               MyApp [4242]
Path:                  /Applications/MyApp.app/Contents/MacOS/MyApp
Identifier:            com.example.MyApp
Version:               1.2 (345)
Code Type:             X86-64 (Native)
Parent Process:        launchd [1]
"""

BODY = """
Exception Type:        EXC_BAD_ACCESS (SIGSEGV)

Thread 0 Crashed:: Dispatch queue: com.apple.main-thread
0   libobjc.A.dylib                 0x00007fff8a1b2097 objc_msgSend + 23
1   MyApp                           0x000000010000a2f4 0x100000000 + 41716
2   MyApp                           0x000000010000b100 0x100000000 + 45312
3   com.example.Helper              0x0000000100300010 0x100300000 + 16
4   ???                             0x0000000000000001 0x0 + 1

Thread 1:
0   MyApp                           0x000000010000a2f4 0x100000000 + 41716

Binary Images:
       0x100000000 -        0x100200fff +MyApp (1.2 - 345) <11111111-2222-3333-4444-555555555555> /Applications/MyApp.app/Contents/MacOS/MyApp
       0x100300000 -        0x100340fff +com.example.Helper (1.0 - 1) <66666666-7777-8888-9999-000000000000> /Applications/MyApp.app/Contents/Frameworks/Helper.framework/Helper
    0x7fff8a1a0000 -     0x7fff8a3a0fff  libobjc.A.dylib (647) <AAAAAAAA-BBBB-CCCC-DDDD-EEEEEEEEEEEE> /usr/lib/libobjc.A.dylib
"""


@pytest.fixture()
def report_header() -> str:
    """Header block with all four mandatory fields."""
    return HEADER


@pytest.fixture()
def sample_report() -> str:
    """macOS style crash report with four unsymbolicated frames and one ambiguous frame."""
    return HEADER + BODY
