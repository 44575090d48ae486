from vmdos.descriptors import default_gdt
from vmdos.kernel import BOOT_TOAST, Kernel, main
from vmdos.keyboard import scancode_to_ascii
from vmdos.vfs import mount_initrd

_KEYMAP = {
    chr(code): sc
    for sc in range(0x80)
    if (code := scancode_to_ascii(sc)) is not None
}


def keys(text):
    return [_KEYMAP[ch] for ch in text]


def screen_text(kernel):
    return "\n".join(kernel.screen.row_text(y) for y in range(kernel.screen.height))


def test_run_init_without_file():
    kernel = Kernel()
    assert kernel.run_init() is None
    assert "(not found)" in screen_text(kernel)
    assert "[user] ready." in screen_text(kernel)


def test_run_init_reads_hello():
    kernel = Kernel()
    mount_initrd(kernel.vfs)
    assert kernel.run_init() == b"Hello from initrd!\n"
    assert "Hello from initrd!" in screen_text(kernel)


def test_boot_sets_up_system():
    kernel = Kernel()
    kernel.boot()
    assert kernel.interrupts_enabled
    assert kernel.gdt.pack() == default_gdt().pack()
    assert kernel.vfs.lookup("/hello.txt").name == "/hello.txt"
    assert kernel.pit.hz == 100
    assert kernel.toaster.message == BOOT_TOAST
    assert not kernel.layout.is_fullscreen()
    assert BOOT_TOAST in kernel.screen.row_text(23)


def test_boot_runs_shell_commands():
    kernel = Kernel()
    kernel.keyboard.feed(keys("help\n"))
    kernel.boot()
    assert "Available commands:" in screen_text(kernel)


def test_main_prints_screen(capsys):
    assert main(["help"]) == 0
    out = capsys.readouterr().out
    assert "Available commands:" in out
    assert "vm_dos v1.0.1 - alpha" in out