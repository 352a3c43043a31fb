DEFAULT_TEMPLATE = """{
  "$schema": "vscode://schemas/color-theme",
  "name": "${themeName}",
  "type": "dark",
  "semanticHighlighting": true,
  "colors": {
    "foreground": "${ink}",
    "focusBorder": "${focusRing}",
    "selection.background": "${selection}",
    "editor.background": "${surface}",
    "editor.foreground": "${ink}",
    "editorCursor.foreground": "${caret}",
    "editor.selectionBackground": "${selectionBg}",
    "editor.selectionForeground": "${selectionFg}",
    "editor.inactiveSelectionBackground": "${selectionMuted}",
    "editor.selectionHighlightBackground": "${accentSoft}",
    "editor.lineHighlightBackground": "${lineSoft}",
    "editor.lineHighlightBorder": "${line}",
    "editorLineNumber.foreground": "${gutter}",
    "editorLineNumber.activeForeground": "${ink}",
    "editorWhitespace.foreground": "${gutterSoft}",
    "editorIndentGuide.background1": "${line}",
    "editorIndentGuide.activeBackground1": "${gutterSoft}",
    "editorGutter.background": "${surface}",
    "editorWidget.background": "${chromeSoft}",
    "editorWidget.border": "${moodHalo}",
    "activityBar.background": "${chrome}",
    "activityBar.foreground": "${ink}",
    "activityBarBadge.background": "${accent}",
    "activityBarBadge.foreground": "${surface}",
    "sideBar.background": "${chromeSoft}",
    "sideBar.foreground": "${tabInactiveFg}",
    "titleBar.activeBackground": "${chrome}",
    "titleBar.activeForeground": "${ink}",
    "statusBar.background": "${chrome}",
    "statusBar.foreground": "${tabInactiveFg}",
    "panel.background": "${chromeSoft}",
    "panel.border": "${line}",
    "editorGroupHeader.tabsBackground": "${chromeSoft}",
    "tab.activeBackground": "${tabActiveBg}",
    "tab.inactiveBackground": "${tabInactiveBg}",
    "tab.border": "${tabBorder}",
    "tab.activeBorder": "${tabActiveBorder}",
    "tab.unfocusedActiveBorder": "${tabUnfocusedActiveBorder}",
    "tab.activeForeground": "${tabActiveFg}",
    "tab.inactiveForeground": "${tabInactiveFg}",
    "input.background": "${fieldBg}",
    "input.border": "${fieldBorder}",
    "input.foreground": "${ink}",
    "input.placeholderForeground": "${fieldPlaceholder}",
    "inputOption.activeBackground": "${fieldBgActive}",
    "button.background": "${accent}",
    "button.foreground": "${surface}",
    "badge.background": "${accentSoft}",
    "badge.foreground": "${ink}",
    "list.activeSelectionBackground": "${selectionBg}",
    "list.activeSelectionForeground": "${selectionFg}",
    "list.inactiveSelectionBackground": "${selectionMuted}",
    "list.hoverBackground": "${lineSoft}",
    "quickInput.background": "${moodSurface}",
    "quickInputList.focusBackground": "${selectionBg}",
    "peekViewEditor.background": "${inputBg}",
    "peekViewResult.background": "${moodSurface}",
    "terminal.background": "${terminalBg}",
    "terminal.foreground": "${terminalFg}",
    "terminalCursor.foreground": "${terminalCursor}",
    "terminal.selectionBackground": "${selection}",
    "terminal.ansiBlack": "${terminalAnsiBlack}",
    "terminal.ansiRed": "${terminalAnsiRed}",
    "terminal.ansiGreen": "${terminalAnsiGreen}",
    "terminal.ansiYellow": "${terminalAnsiYellow}",
    "terminal.ansiBlue": "${terminalAnsiBlue}",
    "terminal.ansiMagenta": "${terminalAnsiMagenta}",
    "terminal.ansiCyan": "${terminalAnsiCyan}",
    "terminal.ansiWhite": "${terminalAnsiWhite}",
    "terminal.ansiBrightBlack": "${terminalAnsiBrightBlack}",
    "terminal.ansiBrightRed": "${terminalAnsiBrightRed}",
    "terminal.ansiBrightGreen": "${terminalAnsiBrightGreen}",
    "terminal.ansiBrightYellow": "${terminalAnsiBrightYellow}",
    "terminal.ansiBrightBlue": "${terminalAnsiBrightBlue}",
    "terminal.ansiBrightMagenta": "${terminalAnsiBrightMagenta}",
    "terminal.ansiBrightCyan": "${terminalAnsiBrightCyan}",
    "terminal.ansiBrightWhite": "${terminalAnsiBrightWhite}"
  },
  "tokenColors": [
    {
      "scope": ["comment", "punctuation.definition.comment"],
      "settings": { "foreground": "${gutter}", "fontStyle": "italic" }
    },
    {
      "scope": ["keyword", "storage"],
      "settings": { "foreground": "${terminalAnsiBrightMagenta}" }
    },
    {
      "scope": ["string"],
      "settings": { "foreground": "${terminalAnsiBrightGreen}" }
    },
    {
      "scope": ["constant.numeric", "constant.language"],
      "settings": { "foreground": "${terminalAnsiBrightYellow}" }
    },
    {
      "scope": ["entity.name.function", "support.function"],
      "settings": { "foreground": "${terminalAnsiBrightBlue}" }
    },
    {
      "scope": ["entity.name.type", "support.type"],
      "settings": { "foreground": "${terminalAnsiBrightCyan}" }
    },
    {
      "scope": ["invalid"],
      "settings": { "foreground": "${terminalAnsiBrightRed}" }
    }
  ]
}
"""
