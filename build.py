"""
Сборщик filetop в один исполняемый файл
"""
import os
import shutil
import subprocess
import sys

EXE_NAME = 'filetop'


def build():
    print("Очистка старых сборок...")
    for folder in ['build', 'dist']:
        if os.path.exists(folder):
            shutil.rmtree(folder)

    print("Сборка exe...")

    cmd = [
        'pyinstaller',
        '--onefile',
        '--console',
        '--name', EXE_NAME,
        '--hidden-import', 'psutil',
        'main.py'
    ]

    result = subprocess.run(cmd, capture_output=True, text=True)

    if result.returncode != 0:
        print("Ошибка сборки:")
        print(result.stderr)
        sys.exit(1)

    exe = EXE_NAME + ('.exe' if sys.platform.startswith('win') else '')
    exe_src = os.path.join('dist', exe)
    print(f"Сборка завершена: {exe_src}")

    release_dir = 'release'
    os.makedirs(release_dir, exist_ok=True)
    shutil.copy(exe_src, os.path.join(release_dir, exe))

    if os.path.exists('README.md'):
        shutil.copy('README.md', os.path.join(release_dir, 'README.md'))

    print(f"Релиз собран в папке: {release_dir}/")


if __name__ == '__main__':
    build()
