"""The table of translated user interface strings.

Each message identifier maps to one row holding a translation for every
supported language, in :class:`LanguageId` order. The table is checked
against both enumerations when this module is imported, so a message or a
language added without updating every row fails immediately instead of
producing a wrong lookup later.

Placeholders such as ``{size}`` are part of the literal text and are left to
the caller to substitute.
"""
from collections.abc import Mapping
from types import MappingProxyType

from ui_localization.core.types import LANGUAGE_COUNT, LanguageId, MessageId
from ui_localization.exceptions import CatalogShapeError

CatalogRow = tuple[str, ...]
"""The translations of one message, indexed by :class:`LanguageId`."""

# fmt: off
_ROWS: dict[MessageId, CatalogRow] = {
    MessageId.CTRL: (
        "Ctrl",  # en
        "Strg",  # de
        "Ctrl",  # es
        "Ctrl",  # fr
        "Ctrl",  # it
        "Ctrl",  # ja
        "Ctrl",  # ko
        "Ctrl",  # pt-br
        "Ctrl",  # ru
        "Ctrl",  # zh-hans
        "Ctrl",  # zh-hant
        "Ctrl",  # vi
    ),
    MessageId.ALT: (
        "Alt",  # en
        "Alt",  # de
        "Alt",  # es
        "Alt",  # fr
        "Alt",  # it
        "Alt",  # ja
        "Alt",  # ko
        "Alt",  # pt-br
        "Alt",  # ru
        "Alt",  # zh-hans
        "Alt",  # zh-hant
        "Alt",  # vi
    ),
    MessageId.SHIFT: (
        "Shift",  # en
        "Umschalt",  # de
        "Mayús",  # es
        "Maj",  # fr
        "Maiusc",  # it
        "Shift",  # ja
        "Shift",  # ko
        "Shift",  # pt-br
        "Shift",  # ru
        "Shift",  # zh-hans
        "Shift",  # zh-hant
        "Shift",  # vi
    ),

    MessageId.OK: (
        "Ok",  # en
        "OK",  # de
        "Aceptar",  # es
        "OK",  # fr
        "OK",  # it
        "OK",  # ja
        "확인",  # ko
        "OK",  # pt-br
        "ОК",  # ru
        "确定",  # zh-hans
        "確定",  # zh-hant
        "Ok",  # vi
    ),
    MessageId.YES: (
        "Yes",  # en
        "Ja",  # de
        "Sí",  # es
        "Oui",  # fr
        "Sì",  # it
        "はい",  # ja
        "예",  # ko
        "Sim",  # pt-br
        "Да",  # ru
        "是",  # zh-hans
        "是",  # zh-hant
        "Đồng ý",  # vi
    ),
    MessageId.NO: (
        "No",  # en
        "Nein",  # de
        "No",  # es
        "Non",  # fr
        "No",  # it
        "いいえ",  # ja
        "아니오",  # ko
        "Não",  # pt-br
        "Нет",  # ru
        "否",  # zh-hans
        "否",  # zh-hant
        "Không",  # vi
    ),
    MessageId.CANCEL: (
        "Cancel",  # en
        "Abbrechen",  # de
        "Cancelar",  # es
        "Annuler",  # fr
        "Annulla",  # it
        "キャンセル",  # ja
        "취소",  # ko
        "Cancelar",  # pt-br
        "Отмена",  # ru
        "取消",  # zh-hans
        "取消",  # zh-hant
        "Huỷ",  # vi
    ),
    MessageId.ALWAYS: (
        "Always",  # en
        "Immer",  # de
        "Siempre",  # es
        "Toujours",  # fr
        "Sempre",  # it
        "常に",  # ja
        "항상",  # ko
        "Sempre",  # pt-br
        "Всегда",  # ru
        "总是",  # zh-hans
        "總是",  # zh-hant
        "Luôn luôn",  # vi
    ),

    MessageId.FILE: (
        "File",  # en
        "Datei",  # de
        "Archivo",  # es
        "Fichier",  # fr
        "File",  # it
        "ファイル",  # ja
        "파일",  # ko
        "Arquivo",  # pt-br
        "Файл",  # ru
        "文件",  # zh-hans
        "檔案",  # zh-hant
        "Tập tin",  # vi
    ),
    MessageId.FILE_NEW: (
        "New File…",  # en
        "Neue Datei…",  # de
        "Nuevo archivo…",  # es
        "Nouveau fichier…",  # fr
        "Nuovo file…",  # it
        "新規ファイル…",  # ja
        "새 파일…",  # ko
        "Novo arquivo…",  # pt-br
        "Новый файл…",  # ru
        "新建文件…",  # zh-hans
        "新增檔案…",  # zh-hant
        "Tập tin mới…",  # vi
    ),
    MessageId.FILE_OPEN: (
        "Open File…",  # en
        "Datei öffnen…",  # de
        "Abrir archivo…",  # es
        "Ouvrir un fichier…",  # fr
        "Apri file…",  # it
        "ファイルを開く…",  # ja
        "파일 열기…",  # ko
        "Abrir arquivo…",  # pt-br
        "Открыть файл…",  # ru
        "打开文件…",  # zh-hans
        "開啟檔案…",  # zh-hant
        "Mở tập tin…",  # vi
    ),
    MessageId.FILE_SAVE: (
        "Save",  # en
        "Speichern",  # de
        "Guardar",  # es
        "Enregistrer",  # fr
        "Salva",  # it
        "保存",  # ja
        "저장",  # ko
        "Salvar",  # pt-br
        "Сохранить",  # ru
        "保存",  # zh-hans
        "儲存",  # zh-hant
        "Lưu",  # vi
    ),
    MessageId.FILE_SAVE_AS: (
        "Save As…",  # en
        "Speichern unter…",  # de
        "Guardar como…",  # es
        "Enregistrer sous…",  # fr
        "Salva come…",  # it
        "名前を付けて保存…",  # ja
        "다른 이름으로 저장…",  # ko
        "Salvar como…",  # pt-br
        "Сохранить как…",  # ru
        "另存为…",  # zh-hans
        "另存新檔…",  # zh-hant
        "Lưu như…",  # vi
    ),
    MessageId.FILE_CLOSE: (
        "Close Editor",  # en
        "Editor schließen",  # de
        "Cerrar editor",  # es
        "Fermer l'éditeur",  # fr
        "Chiudi editor",  # it
        "エディターを閉じる",  # ja
        "편집기 닫기",  # ko
        "Fechar editor",  # pt-br
        "Закрыть редактор",  # ru
        "关闭编辑器",  # zh-hans
        "關閉編輯器",  # zh-hant
        "Đóng editor",  # vi
    ),
    MessageId.FILE_EXIT: (
        "Exit",  # en
        "Beenden",  # de
        "Salir",  # es
        "Quitter",  # fr
        "Esci",  # it
        "終了",  # ja
        "종료",  # ko
        "Sair",  # pt-br
        "Выход",  # ru
        "退出",  # zh-hans
        "退出",  # zh-hant
        "Thoát",  # vi
    ),

    MessageId.EDIT: (
        "Edit",  # en
        "Bearbeiten",  # de
        "Editar",  # es
        "Édition",  # fr
        "Modifica",  # it
        "編集",  # ja
        "편집",  # ko
        "Editar",  # pt-br
        "Правка",  # ru
        "编辑",  # zh-hans
        "編輯",  # zh-hant
        "Chỉnh sửa",  # vi
    ),
    MessageId.EDIT_UNDO: (
        "Undo",  # en
        "Rückgängig",  # de
        "Deshacer",  # es
        "Annuler",  # fr
        "Annulla",  # it
        "元に戻す",  # ja
        "실행 취소",  # ko
        "Desfazer",  # pt-br
        "Отменить",  # ru
        "撤销",  # zh-hans
        "復原",  # zh-hant
        "Hoàn tác",  # vi
    ),
    MessageId.EDIT_REDO: (
        "Redo",  # en
        "Wiederholen",  # de
        "Rehacer",  # es
        "Rétablir",  # fr
        "Ripeti",  # it
        "やり直し",  # ja
        "다시 실행",  # ko
        "Refazer",  # pt-br
        "Повторить",  # ru
        "重做",  # zh-hans
        "重做",  # zh-hant
        "Thực hiện lại",  # vi
    ),
    MessageId.EDIT_CUT: (
        "Cut",  # en
        "Ausschneiden",  # de
        "Cortar",  # es
        "Couper",  # fr
        "Taglia",  # it
        "切り取り",  # ja
        "잘라내기",  # ko
        "Cortar",  # pt-br
        "Вырезать",  # ru
        "剪切",  # zh-hans
        "剪下",  # zh-hant
        "Cắt",  # vi
    ),
    MessageId.EDIT_COPY: (
        "Copy",  # en
        "Kopieren",  # de
        "Copiar",  # es
        "Copier",  # fr
        "Copia",  # it
        "コピー",  # ja
        "복사",  # ko
        "Copiar",  # pt-br
        "Копировать",  # ru
        "复制",  # zh-hans
        "複製",  # zh-hant
        "Chép",  # vi
    ),
    MessageId.EDIT_PASTE: (
        "Paste",  # en
        "Einfügen",  # de
        "Pegar",  # es
        "Coller",  # fr
        "Incolla",  # it
        "貼り付け",  # ja
        "붙여넣기",  # ko
        "Colar",  # pt-br
        "Вставить",  # ru
        "粘贴",  # zh-hans
        "貼上",  # zh-hant
        "Dán",  # vi
    ),
    MessageId.EDIT_FIND: (
        "Find",  # en
        "Suchen",  # de
        "Buscar",  # es
        "Rechercher",  # fr
        "Trova",  # it
        "検索",  # ja
        "찾기",  # ko
        "Encontrar",  # pt-br
        "Найти",  # ru
        "查找",  # zh-hans
        "尋找",  # zh-hant
        "Tìm kiếm",  # vi
    ),
    MessageId.EDIT_REPLACE: (
        "Replace",  # en
        "Ersetzen",  # de
        "Reemplazar",  # es
        "Remplacer",  # fr
        "Sostituisci",  # it
        "置換",  # ja
        "바꾸기",  # ko
        "Substituir",  # pt-br
        "Заменить",  # ru
        "替换",  # zh-hans
        "取代",  # zh-hant
        "Thay thế",  # vi
    ),

    MessageId.VIEW: (
        "View",  # en
        "Ansicht",  # de
        "Ver",  # es
        "Affichage",  # fr
        "Visualizza",  # it
        "表示",  # ja
        "보기",  # ko
        "Exibir",  # pt-br
        "Вид",  # ru
        "视图",  # zh-hans
        "檢視",  # zh-hant
        "Xem",  # vi
    ),
    MessageId.VIEW_FOCUS_STATUSBAR: (
        "Focus Statusbar",  # en
        "Statusleiste fokussieren",  # de
        "Enfocar barra de estado",  # es
        "Activer la barre d’état",  # fr
        "Attiva barra di stato",  # it
        "ステータスバーにフォーカス",  # ja
        "상태 표시줄로 포커스 이동",  # ko
        "Focar barra de status",  # pt-br
        "Фокус на строку состояния",  # ru
        "聚焦状态栏",  # zh-hans
        "聚焦狀態列",  # zh-hant
        "Vào thanh trạng thái",  # vi
    ),
    MessageId.VIEW_WORD_WRAP: (
        "Word Wrap",  # en
        "Zeilenumbruch",  # de
        "Ajuste de línea",  # es
        "Retour à la ligne",  # fr
        "A capo automatico",  # it
        "折り返し",  # ja
        "자동 줄 바꿈",  # ko
        "Quebra de linha",  # pt-br
        "Перенос слов",  # ru
        "自动换行",  # zh-hans
        "自動換行",  # zh-hant
        "Ngắt dòng",  # vi
    ),

    MessageId.HELP: (
        "Help",  # en
        "Hilfe",  # de
        "Ayuda",  # es
        "Aide",  # fr
        "Aiuto",  # it
        "ヘルプ",  # ja
        "도움말",  # ko
        "Ajuda",  # pt-br
        "Помощь",  # ru
        "帮助",  # zh-hans
        "幫助",  # zh-hant
        "Trợ giúp",  # vi
    ),
    MessageId.HELP_ABOUT: (
        "About",  # en
        "Über",  # de
        "Acerca de",  # es
        "À propos",  # fr
        "Informazioni",  # it
        "情報",  # ja
        "정보",  # ko
        "Sobre",  # pt-br
        "О программе",  # ru
        "关于",  # zh-hans
        "關於",  # zh-hant
        "Giới thiệu",  # vi
    ),

    MessageId.UNSAVED_CHANGES_DIALOG_TITLE: (
        "Unsaved Changes",  # en
        "Ungespeicherte Änderungen",  # de
        "Cambios sin guardar",  # es
        "Modifications non enregistrées",  # fr
        "Modifiche non salvate",  # it
        "未保存の変更",  # ja
        "저장되지 않은 변경 사항",  # ko
        "Alterações não salvas",  # pt-br
        "Несохраненные изменения",  # ru
        "未保存的更改",  # zh-hans
        "未儲存的變更",  # zh-hant
        "Thay đổi chưa được lưu",  # vi
    ),
    MessageId.UNSAVED_CHANGES_DIALOG_DESCRIPTION: (
        "Do you want to save the changes you made?",  # en
        "Möchten Sie die vorgenommenen Änderungen speichern?",  # de
        "¿Desea guardar los cambios realizados?",  # es
        "Voulez-vous enregistrer les modifications apportées ?",  # fr
        "Vuoi salvare le modifiche apportate?",  # it
        "変更内容を保存しますか？",  # ja
        "변경한 내용을 저장하시겠습니까?",  # ko
        "Deseja salvar as alterações feitas?",  # pt-br
        "Вы хотите сохранить внесённые изменения?",  # ru
        "您要保存所做的更改吗？",  # zh-hans
        "您要保存所做的變更嗎？",  # zh-hant
        "Bạn có muôn lưu các thay đổi đã thực hiện?",  # vi
    ),
    MessageId.UNSAVED_CHANGES_DIALOG_YES: (
        "Save",  # en
        "Speichern",  # de
        "Guardar",  # es
        "Enregistrer",  # fr
        "Salva",  # it
        "保存",  # ja
        "저장",  # ko
        "Salvar",  # pt-br
        "Сохранить",  # ru
        "保存",  # zh-hans
        "儲存",  # zh-hant
        "Lưu",  # vi
    ),
    MessageId.UNSAVED_CHANGES_DIALOG_NO: (
        "Don't Save",  # en
        "Nicht speichern",  # de
        "No guardar",  # es
        "Ne pas enregistrer",  # fr
        "Non salvare",  # it
        "保存しない",  # ja
        "저장 안 함",  # ko
        "Não salvar",  # pt-br
        "Не сохранять",  # ru
        "不保存",  # zh-hans
        "不儲存",  # zh-hant
        "Không lưu",  # vi
    ),

    MessageId.ABOUT_DIALOG_TITLE: (
        "About",  # en
        "Über",  # de
        "Acerca de",  # es
        "À propos",  # fr
        "Informazioni",  # it
        "情報",  # ja
        "정보",  # ko
        "Sobre",  # pt-br
        "О программе",  # ru
        "关于",  # zh-hans
        "關於",  # zh-hant
        "Giới thiệu",  # vi
    ),
    MessageId.ABOUT_DIALOG_VERSION: (
        "Version: ",  # en
        "Version: ",  # de
        "Versión: ",  # es
        "Version : ",  # fr
        "Versione: ",  # it
        "バージョン: ",  # ja
        "버전: ",  # ko
        "Versão: ",  # pt-br
        "Версия: ",  # ru
        "版本: ",  # zh-hans
        "版本: ",  # zh-hant
        "Phiên bản: ",  # vi
    ),

    MessageId.LARGE_CLIPBOARD_WARNING_LINE1: (
        "Text you copy is shared with the terminal clipboard.",  # en
        "Der kopierte Text wird mit der Terminal-Zwischenablage geteilt.",  # de
        "El texto que copies se comparte con el portapapeles del terminal.",  # es
        "Le texte que vous copiez est partagé avec le presse-papiers du terminal.",  # fr
        "Il testo copiato viene condiviso con gli appunti del terminale.",  # it
        "コピーしたテキストはターミナルのクリップボードと共有されます。",  # ja
        "복사한 텍스트가 터미널 클립보드와 공유됩니다.",  # ko
        "O texto copiado é compartilhado com a área de transferência do terminal.",  # pt-br
        "Скопированный текст передаётся в буфер обмена терминала.",  # ru
        "你复制的文本将共享到终端剪贴板。",  # zh-hans
        "您複製的文字將會與終端機剪貼簿分享。",  # zh-hant
        "Văn bản sao chép được chia sẻ với clipboard của hộp lệnh terminal.",  # vi
    ),
    MessageId.LARGE_CLIPBOARD_WARNING_LINE2: (
        "You copied {size} which may take a long time to share.",  # en
        "Sie haben {size} kopiert, das Weitergeben könnte lange dauern.",  # de
        "Copiaste {size}, lo que puede tardar en compartirse.",  # es
        "Vous avez copié {size}, ce qui peut être long à partager.",  # fr
        "Hai copiato {size}, potrebbe richiedere molto tempo per condividerlo.",  # it
        "{size} をコピーしました。共有に時間がかかる可能性があります。",  # ja
        "{size}를 복사했습니다. 공유하는 데 시간이 오래 걸릴 수 있습니다.",  # ko
        "Você copiou {size}, o que pode demorar para compartilhar.",  # pt-br
        "Вы скопировали {size}; передача может занять много времени.",  # ru
        "你复制了 {size}，共享可能需要较长时间。",  # zh-hans
        "您已複製 {size}，共享可能需要較長時間。",  # zh-hant
        "Bạn đã sao chép {size}, có thể mất một lúc để chia sẻ.",  # vi
    ),
    MessageId.LARGE_CLIPBOARD_WARNING_LINE3: (
        "Do you want to send it anyway?",  # en
        "Möchten Sie es trotzdem senden?",  # de
        "¿Desea enviarlo de todas formas?",  # es
        "Voulez-vous quand même l’envoyer?",  # fr
        "Vuoi inviarlo comunque?",  # it
        "それでも送信しますか？",  # ja
        "그래도 전송하시겠습니까?",  # ko
        "Deseja enviar mesmo assim?",  # pt-br
        "Отправить в любом случае?",  # ru
        "仍要发送吗？",  # zh-hans
        "仍要傳送嗎？",  # zh-hant
        "Bạn có muốn tiếp tục gửi đi không?",  # vi
    ),
    MessageId.SUPER_LARGE_CLIPBOARD_WARNING: (
        "The text you copied is too large to be shared.",  # en
        "Der kopierte Text ist zu groß, um geteilt zu werden.",  # de
        "El texto que copiaste es demasiado grande para compartirse.",  # es
        "Le texte que vous avez copié est trop volumineux pour être partagé.",  # fr
        "Il testo copiato è troppo grande per essere condiviso.",  # it
        "コピーしたテキストは大きすぎて共有できません。",  # ja
        "복사한 텍스트가 너무 커서 공유할 수 없습니다.",  # ko
        "O texto copiado é grande demais para ser compartilhado.",  # pt-br
        "Скопированный текст слишком велик для передачи.",  # ru
        "你复制的文本过大，无法共享。",  # zh-hans
        "您複製的文字過大，無法分享。",  # zh-hant
        "Văn bản sao chép quá lớn để chia sẻ.",  # vi
    ),

    MessageId.WARNING_DIALOG_TITLE: (
        "Warning",  # en
        "Warnung",  # de
        "Advertencia",  # es
        "Avertissement",  # fr
        "Avviso",  # it
        "警告",  # ja
        "경고",  # ko
        "Aviso",  # pt-br
        "Предупреждение",  # ru
        "警告",  # zh-hans
        "警告",  # zh-hant
        "Cảnh báo",  # vi
    ),

    MessageId.ERROR_DIALOG_TITLE: (
        "Error",  # en
        "Fehler",  # de
        "Error",  # es
        "Erreur",  # fr
        "Errore",  # it
        "エラー",  # ja
        "오류",  # ko
        "Erro",  # pt-br
        "Ошибка",  # ru
        "错误",  # zh-hans
        "錯誤",  # zh-hant
        "Lỗi",  # vi
    ),
    MessageId.ERROR_ICU_MISSING: (
        "This operation requires the ICU library",  # en
        "Diese Operation erfordert die ICU-Bibliothek",  # de
        "Esta operación requiere la biblioteca ICU",  # es
        "Cette opération nécessite la bibliothèque ICU",  # fr
        "Questa operazione richiede la libreria ICU",  # it
        "この操作にはICUライブラリが必要です",  # ja
        "이 작업에는 ICU 라이브러리가 필요합니다",  # ko
        "Esta operação requer a biblioteca ICU",  # pt-br
        "Эта операция требует наличия библиотеки ICU",  # ru
        "此操作需要 ICU 库",  # zh-hans
        "此操作需要 ICU 庫",  # zh-hant
        "Thao tác này yêu cầu sử dụng thư viện ICU.",  # vi
    ),

    MessageId.SEARCH_NEEDLE_LABEL: (
        "Find:",  # en
        "Suchen:",  # de
        "Buscar:",  # es
        "Rechercher :",  # fr
        "Trova:",  # it
        "検索:",  # ja
        "찾기:",  # ko
        "Encontrar:",  # pt-br
        "Найти:",  # ru
        "查找:",  # zh-hans
        "尋找:",  # zh-hant
        "Tìm kiếm:",  # vi
    ),
    MessageId.SEARCH_REPLACEMENT_LABEL: (
        "Replace:",  # en
        "Ersetzen:",  # de
        "Reemplazar:",  # es
        "Remplacer :",  # fr
        "Sostituire:",  # it
        "置換:",  # ja
        "바꾸기:",  # ko
        "Substituir:",  # pt-br
        "Замена:",  # ru
        "替换:",  # zh-hans
        "替換:",  # zh-hant
        "Thay thế:",  # vi
    ),
    MessageId.SEARCH_MATCH_CASE: (
        "Match Case",  # en
        "Groß/Klein",  # de
        "May/Min",  # es
        "Casse",  # fr
        "Maius/minus",  # it
        "大/小文字",  # ja
        "대소문자",  # ko
        "Maius/minus",  # pt-br
        "Регистр",  # ru
        "区分大小写",  # zh-hans
        "區分大小寫",  # zh-hant
        "Khớp HOA/thường:",  # vi
    ),
    MessageId.SEARCH_WHOLE_WORD: (
        "Whole Word",  # en
        "Ganzes Wort",  # de
        "Palabra",  # es
        "Mot entier",  # fr
        "Parola",  # it
        "単語単位",  # ja
        "전체 단어",  # ko
        "Palavra",  # pt-br
        "Слово",  # ru
        "全字匹配",  # zh-hans
        "全字匹配",  # zh-hant
        "Toàn bộ từ",  # vi
    ),
    MessageId.SEARCH_USE_REGEX: (
        "Use Regex",  # en
        "RegEx",  # de
        "RegEx",  # es
        "RegEx",  # fr
        "RegEx",  # it
        "正規表現",  # ja
        "정규식",  # ko
        "RegEx",  # pt-br
        "RegEx",  # ru
        "正则",  # zh-hans
        "正則",  # zh-hant
        "Dùng Regex",  # vi
    ),
    MessageId.SEARCH_REPLACE_ALL: (
        "Replace All",  # en
        "Alle ersetzen",  # de
        "Reemplazar todo",  # es
        "Remplacer tout",  # fr
        "Sostituisci tutto",  # it
        "すべて置換",  # ja
        "모두 바꾸기",  # ko
        "Substituir tudo",  # pt-br
        "Заменить все",  # ru
        "全部替换",  # zh-hans
        "全部取代",  # zh-hant
        "Thay thế hết",  # vi
    ),
    MessageId.SEARCH_CLOSE: (
        "Close",  # en
        "Schließen",  # de
        "Cerrar",  # es
        "Fermer",  # fr
        "Chiudi",  # it
        "閉じる",  # ja
        "닫기",  # ko
        "Fechar",  # pt-br
        "Закрыть",  # ru
        "关闭",  # zh-hans
        "關閉",  # zh-hant
        "Đóng",  # vi
    ),

    MessageId.ENCODING_REOPEN: (
        "Reopen with encoding",  # en
        "Mit Kodierung erneut öffnen",  # de
        "Reabrir con codificación",  # es
        "Rouvrir avec un encodage différent",  # fr
        "Riapri con codifica",  # it
        "エンコーディングで再度開く",  # ja
        "인코딩으로 다시 열기",  # ko
        "Reabrir com codificação",  # pt-br
        "Открыть снова с кодировкой",  # ru
        "使用编码重新打开",  # zh-hans
        "使用編碼重新打開",  # zh-hant
        "Mở lại với bộ mã hoá",  # vi
    ),
    MessageId.ENCODING_CONVERT: (
        "Convert to encoding",  # en
        "In Kodierung konvertieren",  # de
        "Convertir a otra codificación",  # es
        "Convertir en encodage",  # fr
        "Converti in codifica",  # it
        "エンコーディングに変換",  # ja
        "인코딩으로 변환",  # ko
        "Converter para codificação",  # pt-br
        "Преобразовать в кодировку",  # ru
        "转换为编码",  # zh-hans
        "轉換為編碼",  # zh-hant
        "Chuyển sang bộ mã hoá",  # vi
    ),

    MessageId.INDENTATION_TABS: (
        "Tabs",  # en
        "Tabs",  # de
        "Tabulaciones",  # es
        "Tabulations",  # fr
        "Tabulazioni",  # it
        "タブ",  # ja
        "탭",  # ko
        "Tabulações",  # pt-br
        "Табы",  # ru
        "制表符",  # zh-hans
        "製表符",  # zh-hant
        "Dấu tab",  # vi
    ),
    MessageId.INDENTATION_SPACES: (
        "Spaces",  # en
        "Leerzeichen",  # de
        "Espacios",  # es
        "Espaces",  # fr
        "Spazi",  # it
        "スペース",  # ja
        "공백",  # ko
        "Espaços",  # pt-br
        "Пробелы",  # ru
        "空格",  # zh-hans
        "空格",  # zh-hant
        "Dấu cách",  # vi
    ),

    MessageId.SAVE_AS_DIALOG_PATH_LABEL: (
        "Folder:",  # en
        "Ordner:",  # de
        "Carpeta:",  # es
        "Dossier :",  # fr
        "Cartella:",  # it
        "フォルダ:",  # ja
        "폴더:",  # ko
        "Pasta:",  # pt-br
        "Папка:",  # ru
        "文件夹:",  # zh-hans
        "資料夾:",  # zh-hant
        "Thư mục:",  # vi
    ),
    MessageId.SAVE_AS_DIALOG_NAME_LABEL: (
        "File name:",  # en
        "Dateiname:",  # de
        "Nombre de archivo:",  # es
        "Nom de fichier :",  # fr
        "Nome del file:",  # it
        "ファイル名:",  # ja
        "파일 이름:",  # ko
        "Nome do arquivo:",  # pt-br
        "Имя файла:",  # ru
        "文件名:",  # zh-hans
        "檔案名稱:",  # zh-hant
        "Tên tập tin:",  # vi
    ),

    MessageId.FILE_OVERWRITE_WARNING: (
        "Confirm Save As",  # en
        "Speichern unter bestätigen",  # de
        "Confirmar Guardar como",  # es
        "Confirmer Enregistrer sous",  # fr
        "Conferma Salva con nome",  # it
        "名前を付けて保存の確認",  # ja
        "다른 이름으로 저장 확인",  # ko
        "Confirmar Salvar como",  # pt-br
        "Подтвердите «Сохранить как…»",  # ru
        "确认另存为",  # zh-hans
        "確認另存新檔",  # zh-hant
        "Xác nhận Lưu như",  # vi
    ),
    MessageId.FILE_OVERWRITE_WARNING_DESCRIPTION: (
        "File already exists. Do you want to overwrite it?",  # en
        "Datei existiert bereits. Möchten Sie sie überschreiben?",  # de
        "El archivo ya existe. ¿Desea sobrescribirlo?",  # es
        "Le fichier existe déjà. Voulez-vous l’écraser?",  # fr
        "Il file esiste già. Vuoi sovrascriverlo?",  # it
        "ファイルは既に存在します。上書きしますか？",  # ja
        "파일이 이미 존재합니다. 덮어쓰시겠습니까?",  # ko
        "O arquivo já existe. Deseja sobrescrevê-lo?",  # pt-br
        "Файл уже существует. Перезаписать?",  # ru
        "文件已存在。要覆盖它吗？",  # zh-hans
        "檔案已存在。要覆蓋它嗎？",  # zh-hant
        "Tập tin đã tồn tại. Bạn có muốn ghi đè nó không?",  # vi
    ),
}
# fmt: on


def verify_catalog(catalog: Mapping[MessageId, CatalogRow]) -> None:
    """Check that *catalog* has a complete row for every message.

    Raises:
        CatalogShapeError: If a message has no row, a row is keyed by
            something else than a message identifier, a row does not have
            one entry per language, or an entry is empty.
    """
    unexpected = [key for key in catalog if not isinstance(key, MessageId)]
    if unexpected:
        raise CatalogShapeError(f"Unexpected catalog keys: {unexpected!r}")

    missing = [message.name for message in MessageId if message not in catalog]
    if missing:
        raise CatalogShapeError(f"Missing catalog rows: {', '.join(missing)}")

    for message, row in catalog.items():
        if len(row) != LANGUAGE_COUNT:
            raise CatalogShapeError(
                f"Row {message.name} has {len(row)} entries, "
                f"expected {LANGUAGE_COUNT}"
            )
        for language, text in zip(LanguageId, row):
            if not isinstance(text, str) or not text:
                raise CatalogShapeError(
                    f"Row {message.name} has no text for {language.tag}"
                )


verify_catalog(_ROWS)

CATALOG: Mapping[MessageId, CatalogRow] = MappingProxyType(_ROWS)
"""Read-only view of the translation table."""


def translate(message_id: MessageId, language: LanguageId) -> str:
    """Return the text of *message_id* in *language*."""
    return CATALOG[message_id][language]


def language_column(language: LanguageId) -> dict[MessageId, str]:
    """Return every message translated in *language*."""
    return {message: row[language] for message, row in CATALOG.items()}
